from .runtime import runtime_config

__all__ = ["runtime_config"]

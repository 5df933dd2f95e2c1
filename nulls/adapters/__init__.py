"""
Adapters between nullable values and their consumers.

- sql_driver: default driver conversion rules
- sqlalchemy_types: column types for SQLAlchemy row mapping
- xml_record / json_record: record-level markup and JSON helpers
"""

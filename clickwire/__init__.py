"""Types, type-name parsing, typed columns, blocks and the binary wire encoding of the ClickHouse native protocol."""

__version__ = "0.1.0"
from schemey.reader.parser import Reader, read_one, read_all

__all__ = ["Reader", "read_one", "read_all"]

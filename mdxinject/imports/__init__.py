from .model import ImportSpecifier
from .table import ImportTable, build_import_table, specifiers_of

__all__ = ["ImportSpecifier", "ImportTable", "build_import_table", "specifiers_of"]

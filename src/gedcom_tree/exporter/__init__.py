from .gedcom_writer import export_gedcom, format_record, write_gedcom
from .json_exporter import build_tree_dict, dumps_tree, export_tree_json

__all__ = [
    "format_record",
    "write_gedcom",
    "export_gedcom",
    "build_tree_dict",
    "dumps_tree",
    "export_tree_json",
]

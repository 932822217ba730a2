from .records import RECORD_COLUMNS, records_to_numpy, export_records

__all__ = ["RECORD_COLUMNS", "records_to_numpy", "export_records"]

from estate_import.extraction.block_extractor import extract_records
from estate_import.extraction.client_extractor import extract_client_info
from estate_import.extraction.normalizer import non_empty_lines, split_blocks
from estate_import.extraction.property_extractor import extract_property_info

__all__ = [
    "extract_client_info",
    "extract_property_info",
    "extract_records",
    "non_empty_lines",
    "split_blocks",
]

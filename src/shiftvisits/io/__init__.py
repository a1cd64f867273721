# shiftvisits/io - Input/output handling
from .csv_loader import load_raw_visits, load_visits, save_visits, visits_to_dataframe
from .excel_export import export_to_excel
from .extraction import CsvVisitExtractor, VisitExtractor, extract_visits
from .results_export import build_results, export_results

__all__ = [
    "load_raw_visits", "load_visits", "save_visits", "visits_to_dataframe",
    "export_to_excel", "export_results", "build_results",
    "VisitExtractor", "CsvVisitExtractor", "extract_visits",
]

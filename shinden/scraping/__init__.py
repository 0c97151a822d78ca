"""Scraping module - Mapping engine, parser, coercion, pagination."""

from .coercion import CoercionError, ConverterRegistry
from .engine import MapperEngine
from .extraction import Extraction, PatternMatcher
from .mapper import BaseDocumentMapper
from .pagination import LastPageProbe, Page, Pageable, Sort, find_last_page_number, reconstruct_total
from .parser import DOMParser, Node, Selection, parse_html

__all__ = [
    "BaseDocumentMapper",
    "CoercionError",
    "ConverterRegistry",
    "DOMParser",
    "Extraction",
    "LastPageProbe",
    "MapperEngine",
    "Node",
    "Page",
    "Pageable",
    "PatternMatcher",
    "Selection",
    "Sort",
    "find_last_page_number",
    "parse_html",
    "reconstruct_total",
]

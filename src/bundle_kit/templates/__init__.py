from .base import AnalysisProvider, Renderer, Template, TemplateFormat
from .duplicates import DuplicatesTemplate
from .sizes import SizesTemplate

__all__ = [
    "AnalysisProvider",
    "DuplicatesTemplate",
    "Renderer",
    "SizesTemplate",
    "Template",
    "TemplateFormat",
]

from textplot.api import plot, render
from textplot.diagnostics import JsonlDiagnosticSink, ListDiagnosticSink
from textplot.errors import PlotConfigError, PlotDataError
from textplot.figure import Figure
from textplot.series import CustomSymbol, FormatterHelpers, GraphPoint, Legend, LineFormatterArgs, Threshold
from textplot.settings import PlotConfig, SymbolOverrides

__all__ = [
    "CustomSymbol",
    "Figure",
    "FormatterHelpers",
    "GraphPoint",
    "JsonlDiagnosticSink",
    "Legend",
    "LineFormatterArgs",
    "ListDiagnosticSink",
    "PlotConfig",
    "PlotConfigError",
    "PlotDataError",
    "SymbolOverrides",
    "Threshold",
    "plot",
    "render",
]

"""Output generation for shift boards (text, PDF)."""

from shiftrange.output.board import BoardRow, ShiftBoard, build_board
from shiftrange.output.pdf_generator import PDFGenerator
from shiftrange.output.text_generator import TextGenerator

__all__ = [
    "BoardRow",
    "PDFGenerator",
    "ShiftBoard",
    "TextGenerator",
    "build_board",
]

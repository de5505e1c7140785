"""Field model extraction: rendering, classification, value synthesis and assembly."""

from .assembler import FieldModelAssembler
from .classifier import Classification, PrimitivePointerClassifier
from .renderer import render
from .synthesizer import ValueSynthesizer, Variant
from .walker import DeclarationWalker

__all__ = [
    "Classification",
    "DeclarationWalker",
    "FieldModelAssembler",
    "PrimitivePointerClassifier",
    "ValueSynthesizer",
    "Variant",
    "render",
]

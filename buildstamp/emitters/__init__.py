#!/usr/bin/env python3
"""
Attribute Emitters Package
==========================

Renders assembly-level attribute declarations as source code.

Available emitters:
- csharp: C# assembly information files
- visualbasic: Visual Basic assembly information files

Base Classes:
- BaseEmitter: Abstract interface for all emitters
- AttributeDeclaration: One attribute with a single constructor argument

Usage:
    from buildstamp.emitters import AssemblyInfoBuilder, get_emitter

    builder = AssemblyInfoBuilder(get_emitter('csharp'))
    builder.with_assembly_version(version).with_cls_compliant(True)
    builder.save('Properties/AssemblyInfo.cs')
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Sequence, Type, Union
import logging

from ..exceptions import UnsupportedLanguageError

AUTO_GENERATED_NOTICE = [
    "-" * 78,
    " <auto-generated>",
    "     This code was generated by buildstamp.",
    "",
    "     Changes to this file may cause incorrect behavior and will be lost if",
    "     the code is regenerated.",
    " </auto-generated>",
    "-" * 78,
]


@dataclass(frozen=True)
class AttributeDeclaration:
    """An assembly attribute with one primitive constructor argument."""
    type_name: str
    argument: Union[str, bool]


class BaseEmitter(ABC):
    """Abstract base class for all attribute emitters."""

    language = ''
    file_extension = ''
    aliases: Sequence[str] = ()

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def render_literal(self, value: Union[str, bool]) -> str:
        """Render a string or boolean as a literal of the target language."""
        pass

    @abstractmethod
    def render_attribute(self, declaration: AttributeDeclaration) -> str:
        """Render one assembly-level attribute declaration."""
        pass

    @abstractmethod
    def render_imports(self, namespaces: Sequence[str]) -> List[str]:
        """Render namespace import lines."""
        pass

    @abstractmethod
    def render_comment(self, text: str) -> str:
        """Render a single line comment."""
        pass

    def render_header(self) -> List[str]:
        return [self.render_comment(line) for line in AUTO_GENERATED_NOTICE]

    def render(self, namespaces: Sequence[str],
               declarations: Sequence[AttributeDeclaration]) -> str:
        """Render a complete source file.

        Args:
            namespaces: Namespaces to import
            declarations: Attributes in the order they were added

        Returns:
            str: Source text ending with a newline
        """
        lines = self.render_header()
        lines.append("")

        imports = self.render_imports(namespaces)
        if imports:
            lines.extend(imports)
            lines.append("")

        lines.extend(self.render_attribute(declaration) for declaration in declarations)
        return "\n".join(lines) + "\n"


from .csharp import CSharpEmitter
from .visualbasic import VisualBasicEmitter
from .assembly_info import AssemblyInfoBuilder

EMITTERS: List[Type[BaseEmitter]] = [CSharpEmitter, VisualBasicEmitter]


def get_supported_languages() -> Dict[str, Type[BaseEmitter]]:
    """Map every accepted language name (lower case) to its emitter class."""
    languages = {}
    for emitter_class in EMITTERS:
        for name in (emitter_class.language, *emitter_class.aliases):
            languages[name.lower()] = emitter_class
    return languages


def get_emitter(language: str) -> BaseEmitter:
    """Create the emitter for ``language`` (case-insensitive, aliases allowed)."""
    if not isinstance(language, str) or not language.strip():
        raise UnsupportedLanguageError(f"Invalid language: {language!r}")

    emitter_class = get_supported_languages().get(language.strip().lower())
    if emitter_class is None:
        raise UnsupportedLanguageError(f"Unsupported language: {language}")
    return emitter_class()


__all__ = [
    'AttributeDeclaration',
    'BaseEmitter',
    'CSharpEmitter',
    'VisualBasicEmitter',
    'AssemblyInfoBuilder',
    'get_emitter',
    'get_supported_languages',
]

"""
Visual Basic Emitter

Renders assembly attributes as Visual Basic source:

    Imports System
    <Assembly: System.Reflection.AssemblyVersionAttribute("1.0.0.0")>
"""

from typing import List, Sequence, Union

from ..exceptions import InvalidArgumentError
from . import AttributeDeclaration, BaseEmitter

CHRW = 'Global.Microsoft.VisualBasic.ChrW'


class VisualBasicEmitter(BaseEmitter):
    """Emitter for Visual Basic assembly information files."""

    language = 'visualbasic'
    file_extension = '.vb'
    aliases = ('vb', 'vbnet', 'vb.net')

    def render_literal(self, value: Union[str, bool]) -> str:
        if isinstance(value, bool):
            return 'True' if value else 'False'
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Unsupported attribute argument: {value!r}")

        # VB strings have no escape sequences: quotes are doubled and
        # control characters are concatenated in with ChrW.
        chars = []
        for char in value:
            if char == '"':
                chars.append('""')
            elif ord(char) < 0x20 or char in '\u2028\u2029':
                chars.append(f'" & {CHRW}({ord(char)}) & "')
            else:
                chars.append(char)
        return '"' + ''.join(chars) + '"'

    def render_attribute(self, declaration: AttributeDeclaration) -> str:
        argument = self.render_literal(declaration.argument)
        return f"<Assembly: {declaration.type_name}({argument})>"

    def render_imports(self, namespaces: Sequence[str]) -> List[str]:
        lines = ["Option Strict Off", "Option Explicit On", ""]
        lines.extend(f"Imports {namespace}" for namespace in namespaces)
        return lines

    def render_comment(self, text: str) -> str:
        return f"'{text}"

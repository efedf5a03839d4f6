"""
C# Emitter

Renders assembly attributes as C# source:

    using System;
    [assembly: System.Reflection.AssemblyVersionAttribute("1.0.0.0")]
"""

from typing import List, Sequence, Union

from ..exceptions import InvalidArgumentError
from . import AttributeDeclaration, BaseEmitter

ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    "'": "\\'",
    '\0': '\\0',
    '\t': '\\t',
    '\n': '\\n',
    '\r': '\\r',
    '\u2028': '\\u2028',
    '\u2029': '\\u2029',
}


class CSharpEmitter(BaseEmitter):
    """Emitter for C# assembly information files."""

    language = 'csharp'
    file_extension = '.cs'
    aliases = ('c#', 'cs')

    def render_literal(self, value: Union[str, bool]) -> str:
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Unsupported attribute argument: {value!r}")

        chars = []
        for char in value:
            if char in ESCAPES:
                chars.append(ESCAPES[char])
            elif ord(char) < 0x20 or ord(char) == 0x7f:
                chars.append(f'\\u{ord(char):04x}')
            else:
                chars.append(char)
        return '"' + ''.join(chars) + '"'

    def render_attribute(self, declaration: AttributeDeclaration) -> str:
        argument = self.render_literal(declaration.argument)
        return f"[assembly: {declaration.type_name}({argument})]"

    def render_imports(self, namespaces: Sequence[str]) -> List[str]:
        return [f"using {namespace};" for namespace in namespaces]

    def render_comment(self, text: str) -> str:
        return f"//{text}"

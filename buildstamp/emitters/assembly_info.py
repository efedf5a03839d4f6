"""
Assembly Information Builder

Accumulates the assembly-level attributes of a build and renders them once
through an emitter.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

from ..exceptions import AttributeAlreadyAddedError, InvalidArgumentError
from ..versioning import Version
from . import AttributeDeclaration, BaseEmitter

CLS_COMPLIANT = 'System.CLSCompliantAttribute'
ASSEMBLY_VERSION = 'System.Reflection.AssemblyVersionAttribute'
ASSEMBLY_FILE_VERSION = 'System.Reflection.AssemblyFileVersionAttribute'
ASSEMBLY_INFORMATIONAL_VERSION = 'System.Reflection.AssemblyInformationalVersionAttribute'

DEFAULT_NAMESPACES = ('System', 'System.Reflection')


class AssemblyInfoBuilder:
    """
    Builds assembly information source files.

    Each attribute can be added at most once. Methods return the builder so
    calls can be chained:

        source = (AssemblyInfoBuilder(CSharpEmitter())
                  .with_assembly_version(version)
                  .with_cls_compliant(True)
                  .build())
    """

    def __init__(self, emitter: BaseEmitter):
        if emitter is None:
            raise InvalidArgumentError("An emitter is required")

        self.emitter = emitter
        self.namespaces: List[str] = list(DEFAULT_NAMESPACES)
        self.attributes: Dict[str, AttributeDeclaration] = {}
        self.logger = logging.getLogger(__name__)

    def _add(self, type_name: str, argument: Union[str, bool]) -> 'AssemblyInfoBuilder':
        if type_name in self.attributes:
            raise AttributeAlreadyAddedError(
                f"The {type_name.rsplit('.', 1)[-1]} declaration has already been added."
            )
        self.attributes[type_name] = AttributeDeclaration(type_name, argument)
        return self

    def with_cls_compliant(self, is_compliant: bool) -> 'AssemblyInfoBuilder':
        """Mark the assembly as CLS-compliant or not."""
        return self._add(CLS_COMPLIANT, bool(is_compliant))

    def with_assembly_version(self, version: Version) -> 'AssemblyInfoBuilder':
        return self._add(ASSEMBLY_VERSION, str(version))

    def with_assembly_file_version(self, version: Version) -> 'AssemblyInfoBuilder':
        return self._add(ASSEMBLY_FILE_VERSION, str(version))

    def with_assembly_informational_version(self, version: str) -> 'AssemblyInfoBuilder':
        """Add free-form version text, e.g. a release code name."""
        if version is None:
            raise InvalidArgumentError("An informational version is required")
        return self._add(ASSEMBLY_INFORMATIONAL_VERSION, str(version))

    def build(self) -> str:
        """Return the generated assembly information source code."""
        return self.emitter.render(self.namespaces, list(self.attributes.values()))

    def save(self, path: Union[str, Path]) -> Path:
        """Write the generated source code to ``path``."""
        path = Path(path)
        path.write_text(self.build(), encoding='utf-8')
        self.logger.debug(f"Assembly information with {len(self.attributes)} attributes saved to {path}")
        return path

"""Document model produced by the extractor.

Documents are a tagged union keyed by the class-level `doc_type`. All
documents except ModuleDoc are frozen; a ModuleDoc's export list is
appended to while modules split across files are unified.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class Access(StrEnum):
    """Member visibility tier."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class MemberKind(StrEnum):
    """What kind of declaration a member documents."""

    PROPERTY = "property"
    METHOD = "method"
    ACCESSOR = "accessor"
    CONSTRUCTOR = "constructor"
    CALL_SIGNATURE = "call-signature"
    CONSTRUCT_SIGNATURE = "construct-signature"
    ENUM_MEMBER = "enum-member"


@dataclass(frozen=True)
class ParameterDoc:
    """A value parameter. Order within a signature is declaration order."""

    name: str
    type: str
    optional: bool = False
    default_value: str | None = None


@dataclass(frozen=True, kw_only=True)
class MemberDoc:
    """A class, interface or enum member."""

    doc_type: ClassVar[str] = "member"

    name: str
    id: str
    kind: MemberKind
    access: Access = Access.PUBLIC
    return_type: str = ""
    parameters: tuple[ParameterDoc, ...] | None = None
    type_parameters: tuple[str, ...] = ()
    optional: bool = False
    is_static: bool = False


@dataclass(frozen=True, kw_only=True)
class ExportDoc:
    """Fields shared by every exported declaration.

    `name` is the name the symbol is exported under; `original_module` is
    set when the declaration lives in a different module than the exporter.
    """

    doc_type: ClassVar[str] = "export"

    name: str
    id: str
    module: str
    original_module: str | None = None


@dataclass(frozen=True, kw_only=True)
class ClassDoc(ExportDoc):
    doc_type: ClassVar[str] = "class"

    members: tuple[MemberDoc, ...] = ()
    type_parameters: tuple[str, ...] = ()
    extends: tuple[str, ...] = ()
    implements: tuple[str, ...] = ()
    abstract: bool = False


@dataclass(frozen=True, kw_only=True)
class InterfaceDoc(ExportDoc):
    """Interface with its call (`(...)`) and construct (`new(...)`) signatures kept apart from members."""

    doc_type: ClassVar[str] = "interface"

    members: tuple[MemberDoc, ...] = ()
    type_parameters: tuple[str, ...] = ()
    extends: tuple[str, ...] = ()
    call_member: MemberDoc | None = None
    new_member: MemberDoc | None = None


@dataclass(frozen=True, kw_only=True)
class FunctionDoc(ExportDoc):
    doc_type: ClassVar[str] = "function"

    parameters: tuple[ParameterDoc, ...] = ()
    type_parameters: tuple[str, ...] = ()
    return_type: str = "void"


@dataclass(frozen=True, kw_only=True)
class EnumDoc(ExportDoc):
    doc_type: ClassVar[str] = "enum"

    members: tuple[MemberDoc, ...] = ()


@dataclass(frozen=True, kw_only=True)
class VariableDoc(ExportDoc):
    doc_type: ClassVar[str] = "var"

    return_type: str = "any"


@dataclass(frozen=True, kw_only=True)
class ConstDoc(VariableDoc):
    doc_type: ClassVar[str] = "const"


@dataclass(frozen=True, kw_only=True)
class TypeAliasDoc(ExportDoc):
    doc_type: ClassVar[str] = "type-alias"

    type_definition: str = ""
    type_parameters: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class UnresolvedExportDoc(ExportDoc):
    """Degraded document for an export whose alias chain leads nowhere."""

    doc_type: ClassVar[str] = "unknown"


@dataclass(kw_only=True, eq=False)
class ModuleDoc:
    """A module or namespace. `id` is the slash-joined path, e.g. ``example/test``."""

    doc_type: ClassVar[str] = "module"

    id: str
    name: str
    file_name: str | None = None
    exports: list["ExportDoc | ModuleDoc"] = field(default_factory=list)


Doc = ModuleDoc | ExportDoc | MemberDoc

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field as ModelField


class DirectoryEntry(BaseModel):
	name: str
	files: List[str] = []
	directories: List["DirectoryEntry"] = []


class Parameterized(BaseModel):
	modifiers: List[str] = []
	name: str
	summary: Optional[str] = None
	parameters: List[str] = []


class Constructor(Parameterized):
	member_kind: Literal["constructor"] = "constructor"


class Method(Parameterized):
	member_kind: Literal["method"] = "method"
	return_type: str


class Field(BaseModel):
	member_kind: Literal["field"] = "field"
	modifiers: List[str] = []
	type: str
	# one declaration may bind several names: `int a, b;`
	names: List[str]
	summary: Optional[str] = None


class Property(BaseModel):
	member_kind: Literal["property"] = "property"
	modifiers: List[str] = []
	type: str
	name: str
	summary: Optional[str] = None


Member = Annotated[
	Union[Constructor, Method, Field, Property],
	ModelField(discriminator="member_kind"),
]


class TypeDeclaration(BaseModel):
	kind: str
	modifiers: List[str] = []
	name: str
	summary: Optional[str] = None
	members: List[Member] = []


class ParsedSource(BaseModel):
	types: List[TypeDeclaration] = []


class Report(BaseModel):
	model_config = ConfigDict(frozen=True)

	sections: Tuple[str, ...] = ()

	def render(self) -> str:
		return "\n".join(self.sections)


class ReportRequest(BaseModel):
	root_path: str
	entities_path: Optional[str] = None
	filter_pattern: Optional[str] = None
	write: bool = False


class ReportResponse(BaseModel):
	markdown: str
	output_path: Optional[str] = None

"""csprojector - inject Roslyn analyzers and a C# language version into generated project files."""

from .blueprints import Blueprint as Blueprint
from .blueprints import default_blueprint as default_blueprint
from .context import Context as Context
from .document import ProjectDocument as ProjectDocument
from .hook import ProjectFileHook as ProjectFileHook
from .hook import generate as generate
from .projects import Project as Project
from .spec import Specification as Specification
from .spec import spec as spec
from .specop import Absent as Absent
from .specop import Ensure as Ensure
from .specop import Present as Present
from .specop import SpecOp as SpecOp
from .specs import AnalyzersSpec as AnalyzersSpec
from .specs import LangVersionSpec as LangVersionSpec
from .specs import PropertySpec as PropertySpec
from .workspace import Workspace as Workspace

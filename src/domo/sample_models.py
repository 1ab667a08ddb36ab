"""Sample application value types and their repository registration.

Plain, frozen Pydantic models describing the state of a small drawing
application. Every field has a default so each type satisfies the value-type
contract (`Type()` is a valid zero instance); equality is Pydantic's
field-by-field comparison.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domo.extensions import add_aggregate_repository, add_singleton_repository
from domo.manager import RepositoryManager

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
NIL_UUID = UUID(int=0)


class Value(BaseModel):
    """Base for sample value types: immutable, compared by value."""

    model_config = ConfigDict(frozen=True)


# =================================================================
# Application and infrastructure domain
# =================================================================


class LogItem(Value):
    category: str = ""
    message: str = ""
    data: str = ""
    time: datetime = EPOCH


class ApplicationEvent(Value):
    event_name: str = ""
    time: datetime = EPOCH


class Error(Value):
    category: str = ""
    message: str = ""


class User(Value):
    name: str = ""
    log_in_time: datetime = EPOCH


class Folders(Value):
    application_folder: str = ""
    log_folder: str = ""
    temp_folder: str = ""
    document_files: str = ""


class Files(Value):
    executable_file: str = ""
    log_file: str = ""
    shared_state_file: str = ""
    collaborators_file: str = ""
    preferences_files: str = ""


class RecentFile(Value):
    path: str = ""
    date_opened: datetime = EPOCH


class Command(Value):
    name: str = ""
    data: str = ""


class Macro(Value):
    name: str = ""
    commands: tuple[Command, ...] = ()


class UserPreferences(Value):
    folders: Folders = Field(default_factory=Folders)
    files: Files = Field(default_factory=Files)
    recent_files: tuple[RecentFile, ...] = ()
    macros: tuple[Macro, ...] = ()


class CommandLineArg(Value):
    name: str = ""
    value: str = ""


class EnvironmentVariable(Value):
    name: str = ""
    value: str = ""


class ChangeRecord(Value):
    data: str = ""
    date_changed: datetime = EPOCH


class KeyBindings(Value):
    key1: str = ""
    key2: str = ""
    command: str = ""


class Job(Value):
    name: str = ""
    completed: bool = False
    canceled: bool = False
    progress: float = Field(default=0.0, ge=0.0, le=1.0, description="Progress (0.0-1.0)")
    determinate: bool = False


class LastInput(Value):
    time: datetime = EPOCH


class StatusCode(Enum):
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class Status(Value):
    message: str = ""
    code: StatusCode = StatusCode.GOOD


class CurrentFile(Value):
    file_path: str = ""


class UndoItem(Value):
    """One reversible change: which model of which repository, before and after (serialized)."""

    repo_id: UUID = NIL_UUID
    model_id: UUID = NIL_UUID
    old_value: str = ""
    new_value: str = ""


class UndoState(Value):
    current_index: int = 0
    undo_items: tuple[UndoItem, ...] = ()


class Freeze(Value):
    pass


# =================================================================
# Presentation domain
# =================================================================


class ActiveRepo(Value):
    repo_id: UUID = NIL_UUID


class ViewTypeEnum(Enum):
    CANVAS = "canvas"
    TEXT = "text"
    LIST = "list"


class ViewSettings(Value):
    view_type: ViewTypeEnum = ViewTypeEnum.CANVAS


class Point(Value):
    x: int = 0
    y: int = 0


class Size(Value):
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class Color(Value):
    """8-bit RGB color."""

    r: int = Field(default=0, ge=0, le=255, description="Red (0-255)")
    g: int = Field(default=0, ge=0, le=255, description="Green (0-255)")
    b: int = Field(default=0, ge=0, le=255, description="Blue (0-255)")


class ClickAnimation(Value):
    position: Point = Field(default_factory=Point)
    time: datetime = EPOCH


# =================================================================
# Business domain
# =================================================================


class DrawingShape(Value):
    pass


class Line(DrawingShape):
    start: Point = Field(default_factory=Point)
    end: Point = Field(default_factory=Point)


class Ellipse(DrawingShape):
    center: Point = Field(default_factory=Point)
    size: Size = Field(default_factory=Size)


class Rectangle(DrawingShape):
    position: Point = Field(default_factory=Point)
    size: Size = Field(default_factory=Size)


class DrawingCommand(Value):
    pass


class SetPen(DrawingCommand):
    color: Color = Field(default_factory=Color)
    width: float = Field(default=1.0, ge=0.0)


class SetBrush(DrawingCommand):
    color: Color = Field(default_factory=Color)


class WriteText(DrawingCommand):
    position: Point = Field(default_factory=Point)
    text: str = ""


class Draw(DrawingCommand):
    shape: DrawingShape = Field(default_factory=DrawingShape)


class ClearCanvas(DrawingCommand):
    pass


class CanvasClick(DrawingCommand):
    position: Point = Field(default_factory=Point)


AGGREGATE_TYPES: tuple[type[Value], ...] = (
    LogItem,
    Error,
    CommandLineArg,
    EnvironmentVariable,
    RecentFile,
    ChangeRecord,
    Command,
    Macro,
    Job,
    ClickAnimation,
    DrawingShape,
    DrawingCommand,
    UndoItem,
)

SINGLETON_TYPES: tuple[type[Value], ...] = (
    User,
    UserPreferences,
    ActiveRepo,
    ViewSettings,
    CurrentFile,
    LastInput,
    UndoState,
)


def register_repos(manager: RepositoryManager) -> RepositoryManager:
    """Register one repository per sample value type in `manager`."""
    for value_type in AGGREGATE_TYPES:
        add_aggregate_repository(manager, value_type)
    for value_type in SINGLETON_TYPES:
        add_singleton_repository(manager, value_type)
    return manager

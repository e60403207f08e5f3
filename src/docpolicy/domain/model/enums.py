"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Declared visibility of a code element by naming convention."""

    PUBLIC = auto()  # no underscore, or dunder
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name


class Severity(Enum):
    """Violation severity."""

    ERROR = auto()  # check fails
    WARNING = auto()  # check passes, warning shown


class DocType(Enum):
    """Category of declaration a documentation requirement applies to.

    Values are the keys used in configuration.
    """

    CLASSES = "classes"
    ENUMS = "enums"
    ENUM_MEMBERS = "enum-members"
    FUNCTIONS = "functions"
    INTERFACES = "interfaces"
    METHODS = "methods"
    PROPERTIES = "properties"
    VARIABLES = "variables"


class DeclarationKind(Enum):
    """Structural tag of a class or Protocol member."""

    PROPERTY_DECLARATION = auto()  # x: int = 0 in a class body
    METHOD_DECLARATION = auto()  # def in a class body
    PROPERTY_SIGNATURE = auto()  # x: int in a Protocol body
    METHOD_SIGNATURE = auto()  # def in a Protocol body, @overload stub
    ACCESSOR = auto()  # @property getter
    CONSTRUCTOR = auto()  # __init__, __new__
    OTHER = auto()


class MemberCategory(Enum):
    """Construct category owning a member.

    Closed set: every member exclusion is specialized by exactly one.
    """

    CLASS_MEMBER = auto()
    INTERFACE_MEMBER = auto()

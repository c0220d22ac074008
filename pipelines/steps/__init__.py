# Namespace for pipeline steps
from .validate_query import ValidateQuery  # noqa: F401
from .resolve_contact import ResolveContact  # noqa: F401
from .render_template import RenderTemplate  # noqa: F401

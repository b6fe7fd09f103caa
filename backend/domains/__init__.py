"""Community domains.

Model modules are imported here so that every table is registered on the
shared metadata before mappers are configured.
"""

from backend.domains.member import models as member_models  # noqa: F401
from backend.domains.board import models as board_models  # noqa: F401
from backend.domains.comment import models as comment_models  # noqa: F401

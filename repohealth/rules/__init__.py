"""Rule modules.

Every rule is a pure function of ``AnalysisInput`` returning a list of
findings. Rules share no state and may run in any order.
"""

from ..models import RuleModule
from .code_patterns import check_code_patterns
from .config_quality import check_config_quality
from .dependencies import check_dependencies
from .documentation import check_documentation
from .project_structure import check_project_structure
from .security import check_security
from .testing import check_testing

RULE_MODULES: tuple[RuleModule, ...] = (
    check_project_structure,
    check_dependencies,
    check_config_quality,
    check_code_patterns,
    check_security,
    check_documentation,
    check_testing,
)

__all__ = [
    "RULE_MODULES",
    "check_code_patterns",
    "check_config_quality",
    "check_dependencies",
    "check_documentation",
    "check_project_structure",
    "check_security",
    "check_testing",
]

# Model family detection shared by every request builder
import re
from typing import Tuple

# Families that take max_completion_tokens instead of max_tokens and reject a
# temperature override. A family name may sit anywhere in a gateway alias
# ("openai/gpt-5", "azure-gpt-5") but must not run into another digit
# ("gpt-50" is not gpt-5).
MAX_COMPLETION_TOKENS_FAMILIES: Tuple[re.Pattern, ...] = (
    re.compile(r"(?<![a-z0-9])gpt[-_.]?5(?!\d)", re.IGNORECASE),
)


def uses_max_completion_tokens(model_id: str) -> bool:
    """True when the model belongs to a max_completion_tokens family."""
    return any(pattern.search(model_id or "") for pattern in MAX_COMPLETION_TOKENS_FAMILIES)

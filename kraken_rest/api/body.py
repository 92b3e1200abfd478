"""
Body of a private (POST) request.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlencode


@dataclass(frozen=True)
class Body:
    """
    Form fields of a private request.

    The API parameters come first, followed by the nonce and, when set,
    the one-time password.
    """
    nonce: int
    params: Dict[str, str] = field(default_factory=dict)
    otp: Optional[str] = None

    def fields(self) -> List[Tuple[str, str]]:
        """Ordered form fields."""
        fields = [(key, value) for key, value in self.params.items() if key not in ("nonce", "otp")]
        fields.append(("nonce", str(self.nonce)))
        if self.otp is not None:
            fields.append(("otp", self.otp))
        return fields

    def urlencode(self) -> str:
        """application/x-www-form-urlencoded representation of this body."""
        return urlencode(self.fields())

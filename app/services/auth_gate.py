"""Bearer-token gate: decide from request headers whether a request is admitted."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from app.core.errors import InvalidSignature, MalformedToken, VerificationError
from app.core.security import TokenIssuer

logger = logging.getLogger(__name__)

REASON_MISSING_HEADER = "missing header"
REASON_MALFORMED_TOKEN = "malformed token"
REASON_AUTH_FAILED = "authentication failed"
REASON_ADMITTED = "admitted"


@dataclass(frozen=True)
class GateDecision:
    """Outcome of evaluate_authorization; claims are set only when admitted."""

    admitted: bool
    reason: str
    claims: dict[str, Any] | None = None


def evaluate_authorization(headers: Mapping[str, str], issuer: TokenIssuer) -> GateDecision:
    """
    Check the Authorization header and verify its token.

    The header must split on whitespace into exactly two parts (scheme and
    credential); the scheme word itself is not checked. Does not mutate state.
    """
    value = headers.get("authorization") or headers.get("Authorization")
    if not value:
        return GateDecision(admitted=False, reason=REASON_MISSING_HEADER)

    parts = value.split()
    if len(parts) != 2:
        return GateDecision(admitted=False, reason=REASON_MALFORMED_TOKEN)

    try:
        claims = issuer.verify(parts[1])
    except InvalidSignature:
        logger.warning("Bearer token rejected: signature mismatch")
        return GateDecision(admitted=False, reason=REASON_AUTH_FAILED)
    except MalformedToken:
        logger.info("Bearer token rejected: not a decodable token")
        return GateDecision(admitted=False, reason=REASON_AUTH_FAILED)
    except VerificationError as e:
        logger.info("Bearer token rejected: %s", e.message)
        return GateDecision(admitted=False, reason=REASON_AUTH_FAILED)
    return GateDecision(admitted=True, reason=REASON_ADMITTED, claims=claims)

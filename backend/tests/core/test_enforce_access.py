"""Access Enforcement — Required mode and ownership checks.

Tests:
    - require_identity: None → 401, identity passes through unchanged
    - check_owner: same user id passes, different id → 403 naming the action
"""

import pytest

from eureka.core.enforce_access import check_owner, require_identity
from eureka.core.errors import ForbiddenError, UnauthorizedError
from eureka.core.identity import Identity

ALICE = Identity(user_id="u-alice", username="alice", email="a@example.com")


def test_require_identity_rejects_anonymous():
    with pytest.raises(UnauthorizedError) as exc:
        require_identity(None)
    assert exc.value.http_status == 401


def test_require_identity_returns_identity():
    assert require_identity(ALICE) is ALICE


def test_owner_passes():
    check_owner(ALICE, "u-alice", "Question", "update")


def test_non_owner_forbidden():
    with pytest.raises(ForbiddenError) as exc:
        check_owner(ALICE, "u-bob", "Comment", "delete")
    assert exc.value.http_status == 403
    assert exc.value.message == "Not authorized to delete this comment"


def test_ownership_compares_ids_not_usernames():
    impostor = Identity(user_id="u-other", username="alice", email="a@example.com")
    with pytest.raises(ForbiddenError):
        check_owner(impostor, "u-alice", "Answer", "update")

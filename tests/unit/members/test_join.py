"""MemberService against the real repository and database."""

from __future__ import annotations

import pytest

from modules.core.exceptions import IllegalState
from modules.members.dtos import JoinMemberDTO
from modules.members.models import Member
from modules.members.repositories.django_repository import MemberDjangoRepository
from modules.members.services import MemberService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return MemberService(repository=MemberDjangoRepository())


class TestJoinPersisted:
    def test_join_then_find_one(self, service):
        member_id = service.join(JoinMemberDTO(name="kim", city="Seoul"))
        member = service.find_one(member_id)
        assert member.name == "kim"
        assert member.city == "Seoul"

    def test_second_join_with_same_name_fails(self, service):
        service.join(JoinMemberDTO(name="kim"))

        with pytest.raises(IllegalState):
            service.join(JoinMemberDTO(name="kim"))

        assert Member.objects.filter(name="kim").count() == 1

    def test_name_is_stripped_before_duplicate_check(self, service):
        service.join(JoinMemberDTO(name="kim"))

        with pytest.raises(IllegalState):
            service.join(JoinMemberDTO(name="  kim  "))

    def test_name_match_is_case_sensitive(self, service):
        service.join(JoinMemberDTO(name="kim"))
        service.join(JoinMemberDTO(name="Kim"))
        assert Member.objects.count() == 2

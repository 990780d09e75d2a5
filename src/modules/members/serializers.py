"""Member DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.members.models import Member


class MemberSerializer(serializers.ModelSerializer):
    """Read serializer for the Member resource."""

    address = serializers.CharField(read_only=True)

    class Meta:
        model = Member
        fields = [
            "id",
            "name",
            "city",
            "street",
            "zipcode",
            "address",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class JoinMemberSerializer(serializers.Serializer):
    """Shape check for the member registration payload."""

    name = serializers.CharField(max_length=255, trim_whitespace=False)
    city = serializers.CharField(required=False, allow_blank=True, max_length=255)
    street = serializers.CharField(required=False, allow_blank=True, max_length=255)
    zipcode = serializers.CharField(required=False, allow_blank=True, max_length=20)


class UpdateMemberSerializer(serializers.Serializer):
    """Shape check for renaming a member."""

    name = serializers.CharField(max_length=255, trim_whitespace=False)

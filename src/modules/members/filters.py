import django_filters

from modules.members.models import Member


class MemberFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    city = django_filters.CharFilter(field_name="city", lookup_expr="iexact")

    class Meta:
        model = Member
        fields = ["name", "city"]

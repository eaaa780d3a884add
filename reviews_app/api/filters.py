import django_filters
from ..models import Review

class ReviewFilter(django_filters.FilterSet):
    """
    A FilterSet for the review list endpoints.

    Lets clients narrow a user's reviews down to a specific star rating from either side,
    e.g. `?pet_owner_rating=5`.
    """
    pet_owner_rating = django_filters.NumberFilter(field_name="pet_owner_rating")
    sitter_rating = django_filters.NumberFilter(field_name="sitter_rating")

    class Meta:
        model = Review
        fields = ['pet_owner_rating', 'sitter_rating']

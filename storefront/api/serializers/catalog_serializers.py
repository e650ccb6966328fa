from rest_framework import serializers

from storefront.domain.records import CATEGORY_NAMES


class ServiceSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    developer = serializers.CharField(read_only=True)
    developer_id = serializers.CharField(read_only=True)
    developer_verified = serializers.BooleanField(read_only=True)
    rating = serializers.FloatField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    image_url = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    image_urls = serializers.ListField(child=serializers.CharField(), read_only=True)


class CategorySerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)


class DeveloperSummarySerializer(serializers.Serializer):
    developer_id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    verified = serializers.BooleanField(read_only=True)
    service_count = serializers.IntegerField(read_only=True)
    categories = serializers.ListField(child=serializers.CharField(), read_only=True)


class ReviewSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    developer_id = serializers.CharField(read_only=True)
    reviewer_name = serializers.CharField(read_only=True)
    rating = serializers.IntegerField(read_only=True)
    comment = serializers.CharField(read_only=True)
    date = serializers.CharField(read_only=True)


class PageSerializer(serializers.Serializer):
    """Pagination block shared by paginated responses"""

    page = serializers.IntegerField(read_only=True)
    num_pages = serializers.IntegerField(read_only=True)
    count = serializers.IntegerField(read_only=True)
    has_next = serializers.BooleanField(read_only=True)
    has_previous = serializers.BooleanField(read_only=True)


class ServiceSearchQuerySerializer(serializers.Serializer):
    """Query parameters for catalog search. Invalid prices are ignored rather than rejected."""

    q = serializers.CharField(required=False, allow_blank=True, default="")
    price_min = serializers.CharField(required=False, allow_blank=True)
    price_max = serializers.CharField(required=False, allow_blank=True)
    categories = serializers.CharField(required=False, allow_blank=True, help_text="Comma separated")
    rating = serializers.CharField(required=False, allow_blank=True)
    page = serializers.CharField(required=False, default="1")


class ReviewRequestSerializer(serializers.Serializer):
    rating = serializers.IntegerField(required=False, default=0, help_text="1 to 5")
    comment = serializers.CharField(required=False, allow_blank=True, default="")


class ListingRequestSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.CharField(required=False, allow_blank=True, default="")
    category = serializers.CharField(required=False, allow_blank=True, default="", help_text=", ".join(CATEGORY_NAMES))
    description = serializers.CharField(required=False, allow_blank=True, default="")
    images = serializers.ListField(child=serializers.FileField(), required=False, default=list)

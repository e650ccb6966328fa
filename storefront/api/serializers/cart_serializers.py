from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    itemId = serializers.CharField(source="item_id", read_only=True)
    title = serializers.CharField(read_only=True)
    unitPrice = serializers.DecimalField(source="unit_price", max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    sellerRef = serializers.CharField(source="seller_ref", read_only=True)
    lineTotal = serializers.DecimalField(source="line_total", max_digits=12, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    items = CartLineSerializer(source="lines", many=True, read_only=True)
    itemCount = serializers.IntegerField(source="item_count", read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class AddToCartRequestSerializer(serializers.Serializer):
    """Request body for adding a catalog service to the cart"""

    item_id = serializers.CharField(help_text="Catalog service id")


class UpdateQuantityRequestSerializer(serializers.Serializer):
    """Request body for changing a line's quantity (0 or less removes the line)"""

    quantity = serializers.IntegerField(help_text="New quantity")


class PurchaseConfirmationSerializer(serializers.Serializer):
    order_ids = serializers.ListField(child=serializers.CharField(), read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

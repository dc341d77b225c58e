"""
Order serializers.
"""
from rest_framework import serializers


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.IntegerField(read_only=True)
    customer_id = serializers.IntegerField(read_only=True)
    customer_name = serializers.CharField(read_only=True, allow_null=True)
    order_number = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_display = serializers.CharField(read_only=True)
    priority = serializers.CharField(read_only=True)
    priority_display = serializers.CharField(read_only=True)
    priority_color = serializers.CharField(read_only=True)
    is_urgent = serializers.BooleanField(read_only=True)
    fitter_id = serializers.IntegerField(read_only=True, allow_null=True)
    factory_id = serializers.IntegerField(read_only=True, allow_null=True)
    saddle_id = serializers.IntegerField(read_only=True, allow_null=True)
    saddle_specifications = serializers.JSONField(read_only=True)
    measurements = serializers.JSONField(read_only=True, allow_null=True)
    seat_sizes = serializers.ListField(child=serializers.CharField(), read_only=True, allow_null=True)
    special_instructions = serializers.CharField(read_only=True, allow_null=True)
    estimated_delivery_date = serializers.DateTimeField(read_only=True, allow_null=True)
    actual_delivery_date = serializers.DateTimeField(read_only=True, allow_null=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    deposit_paid = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    balance_owing = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    payment_percentage = serializers.DecimalField(max_digits=5, decimal_places=2, read_only=True)
    requires_deposit = serializers.BooleanField(read_only=True)
    is_overdue = serializers.BooleanField(read_only=True)
    days_until_delivery = serializers.IntegerField(read_only=True, allow_null=True)
    possible_transitions = serializers.ListField(child=serializers.CharField(), read_only=True)
    version = serializers.IntegerField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for placing an order."""
    customer_id = serializers.IntegerField(min_value=1)
    order_number = serializers.CharField(max_length=50, required=False, allow_blank=True)
    saddle_specifications = serializers.JSONField(required=False, default=dict)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    special_instructions = serializers.CharField(required=False, allow_blank=True)
    estimated_delivery_date = serializers.DateTimeField(required=False)
    priority = serializers.CharField(max_length=20, required=False, allow_blank=True)
    fitter_id = serializers.IntegerField(required=False)
    factory_id = serializers.IntegerField(required=False)
    customer_name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    seat_sizes = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    saddle_id = serializers.IntegerField(required=False)

    def validate_saddle_specifications(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Saddle specifications must be an object")
        return value


class OrderDetailsUpdateSerializer(serializers.Serializer):
    """Serializer for partial detail updates."""
    measurements = serializers.JSONField(required=False)
    estimated_delivery_date = serializers.DateTimeField(required=False)
    seat_sizes = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    customer_name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    saddle_id = serializers.IntegerField(required=False)

    def validate_measurements(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Measurements must be an object")
        return value


class OrderStatusChangeSerializer(serializers.Serializer):
    # Free text so unknown values reach the domain and report the valid set
    status = serializers.CharField(max_length=30)


class OrderPriorityUpdateSerializer(serializers.Serializer):
    priority = serializers.CharField(max_length=20)


class DepositPaymentSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)


class OrderCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(allow_blank=True)


class OrderAssignmentSerializer(serializers.Serializer):
    """Serializer for assigning a fitter and/or a factory."""
    fitter_id = serializers.IntegerField(required=False)
    factory_id = serializers.IntegerField(required=False)


class OrderCommandResultSerializer(serializers.Serializer):
    """Order output plus any warnings raised by the command."""
    order = OrderSerializer(read_only=True)
    warnings = serializers.ListField(child=serializers.CharField(), read_only=True)

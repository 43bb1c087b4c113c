"""
Common Error Constants

Centralized error messages shared by services and routers.
"""

# Cart errors
ERROR_CART_EMPTY = "Cart is empty"
ERROR_DEVICE_ID_REQUIRED = "X-Device-Id header is required"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCT_UNAVAILABLE = "Product is not available for order"

# Order errors
ERROR_ORDER_NOT_FOUND = "Order not found"
ERROR_ORDER_FAILED = "Failed to place order"

# Location errors
ERROR_INVALID_PINCODE = "Enter a valid 6-digit pincode"
ERROR_LOCATION_NOT_SERVICEABLE = "We do not deliver to this pincode yet"

# Generic errors
ERROR_INTERNAL = "Internal server error"

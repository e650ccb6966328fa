# Storefront API Serializers

from .account_serializers import (
    ChatRequestSerializer,
    ContactRequestSerializer,
    DeveloperSettingsSerializer,
    ErrorResponseSerializer,
    IdentitySerializer,
    NavigateRequestSerializer,
    OAuthResponseSerializer,
    ResetPasswordRequestSerializer,
    SignInRequestSerializer,
    SignUpRequestSerializer,
)
from .cart_serializers import (
    AddToCartRequestSerializer,
    CartLineSerializer,
    CartSerializer,
    PurchaseConfirmationSerializer,
    UpdateQuantityRequestSerializer,
)
from .catalog_serializers import (
    CategorySerializer,
    DeveloperSummarySerializer,
    ListingRequestSerializer,
    PageSerializer,
    ReviewRequestSerializer,
    ReviewSerializer,
    ServiceSearchQuerySerializer,
    ServiceSerializer,
)

__all__ = [
    "AddToCartRequestSerializer",
    "CartLineSerializer",
    "CartSerializer",
    "CategorySerializer",
    "ChatRequestSerializer",
    "ContactRequestSerializer",
    "DeveloperSettingsSerializer",
    "DeveloperSummarySerializer",
    "ErrorResponseSerializer",
    "IdentitySerializer",
    "ListingRequestSerializer",
    "NavigateRequestSerializer",
    "OAuthResponseSerializer",
    "PageSerializer",
    "PurchaseConfirmationSerializer",
    "ResetPasswordRequestSerializer",
    "ReviewRequestSerializer",
    "ReviewSerializer",
    "ServiceSearchQuerySerializer",
    "ServiceSerializer",
    "SignInRequestSerializer",
    "SignUpRequestSerializer",
    "UpdateQuantityRequestSerializer",
]

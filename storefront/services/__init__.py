from .account_service import AccountService
from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .cart_service import CartService
from .catalog_service import CatalogService, PageOf, ServiceFilters
from .chat_service import ChatService
from .checkout_service import CheckoutOrchestrator, PurchaseConfirmation, PurchaseError
from .dashboard_service import DashboardService, DeletedService
from .listing_service import ListingService
from .message_service import MessageService
from .profile_service import ProfileService
from .review_service import ReviewService

__all__ = [
    "BaseService",
    "ServiceResult",
    "service_ok",
    "service_err",
    "ErrorCodes",
    "AccountService",
    "CartService",
    "CatalogService",
    "ServiceFilters",
    "PageOf",
    "ChatService",
    "CheckoutOrchestrator",
    "PurchaseConfirmation",
    "PurchaseError",
    "DashboardService",
    "DeletedService",
    "ListingService",
    "MessageService",
    "ProfileService",
    "ReviewService",
]

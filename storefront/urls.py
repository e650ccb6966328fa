from django.urls import path

from .api.views import (
    auth_views,
    cart_views,
    catalog_views,
    contact_views,
    dashboard_views,
    prometheus_metrics,
    session_views,
)

app_name = "storefront"

urlpatterns = [
    # Session and view routing
    path("session/", session_views.session_state, name="session"),
    path("navigate/", session_views.navigate, name="navigate"),
    path("notification/", session_views.notification, name="notification"),
    # Cart and checkout
    path("cart/", cart_views.CartViewSet.as_view({"get": "list", "delete": "clear"}), name="cart"),
    path("cart/items/", cart_views.CartViewSet.as_view({"post": "add_item"}), name="cart-items"),
    path(
        "cart/items/<str:item_id>/",
        cart_views.CartViewSet.as_view({"patch": "update_item", "delete": "remove_item"}),
        name="cart-item-detail",
    ),
    path("checkout/", cart_views.checkout, name="checkout"),
    # Accounts
    path("auth/sign-in/", auth_views.sign_in, name="sign-in"),
    path("auth/sign-up/", auth_views.sign_up, name="sign-up"),
    path("auth/reset-password/", auth_views.reset_password, name="reset-password"),
    path("auth/oauth/<str:provider>/", auth_views.oauth_url, name="oauth-url"),
    path("auth/sign-out/", auth_views.sign_out, name="sign-out"),
    # Catalog
    path("services/", catalog_views.service_list, name="service-list"),
    path("services/<str:service_id>/", catalog_views.service_detail, name="service-detail"),
    path("categories/", catalog_views.category_list, name="category-list"),
    path("categories/<str:category_name>/services/", catalog_views.category_services, name="category-services"),
    path("developers/", catalog_views.developer_list, name="developer-list"),
    path("developers/<str:developer_id>/", catalog_views.developer_profile, name="developer-profile"),
    path("developers/<str:developer_id>/reviews/", catalog_views.submit_review, name="developer-reviews"),
    # Dashboards and listings
    path("dashboard/customer/", dashboard_views.customer_dashboard, name="customer-dashboard"),
    path("dashboard/developer/", dashboard_views.developer_dashboard, name="developer-dashboard"),
    path(
        "dashboard/developer/services/<str:service_id>/",
        dashboard_views.delete_service,
        name="developer-service-delete",
    ),
    path("listings/", dashboard_views.ListingViewSet.as_view({"post": "create"}), name="listing-create"),
    path("listings/<str:pk>/", dashboard_views.ListingViewSet.as_view({"put": "update"}), name="listing-update"),
    path(
        "developer/settings/",
        dashboard_views.DeveloperSettingsViewSet.as_view({"get": "retrieve", "put": "update"}),
        name="developer-settings",
    ),
    # Contact and assistant
    path("contact/", contact_views.send_message, name="contact"),
    path("chat/", contact_views.chat, name="chat"),
    # Prometheus metrics endpoint
    path("metrics/", prometheus_metrics.storefront_prometheus_metrics, name="storefront-metrics"),
]

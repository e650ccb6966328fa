from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from django.test import SimpleTestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import ServiceContainer
from storefront.domain.sample_data import SAMPLE_SERVICES

pytestmark = pytest.mark.integration


class StorefrontAPITestCase(SimpleTestCase):
    """Runs requests against in-memory adapters shared through one container."""

    def setUp(self):
        self.container = ServiceContainer()
        self.container.configure_for_testing()
        patcher = patch("owscorpStorefront.middleware.ServiceContainer", return_value=self.container)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.data = self.container.data()
        self.data.seed("services", SAMPLE_SERVICES)
        self.directory = self.container.user_directory()
        self.directory.add_account("buyer@example.com", "secret123", {"full_name": "Bea Buyer", "user_type": "customer"})
        self.seller = self.directory.add_account(
            "dev@example.com", "secret123", {"full_name": "Dev Eloper", "user_type": "developer"}
        )
        self.client = APIClient()

    def sign_in(self, email="buyer@example.com"):
        response = self.client.post(
            reverse("storefront:sign-in"), {"email": email, "password": "secret123"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return response

    def add_to_cart(self, item_id):
        return self.client.post(reverse("storefront:cart-items"), {"item_id": item_id}, format="json")


class SessionViewTest(StorefrontAPITestCase):
    def test_anonymous_session(self):
        response = self.client.get(reverse("storefront:session"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["state"], "anonymous")
        self.assertIsNone(response.data["identity"])
        self.assertEqual(response.data["view"], {"page": "home", "params": {}})

    def test_session_survives_requests(self):
        self.sign_in()

        response = self.client.get(reverse("storefront:session"))

        self.assertEqual(response.data["state"], "authenticated")
        self.assertEqual(response.data["identity"]["role"], "buyer")
        self.assertEqual(response.data["view"]["page"], "customer-dashboard")

    def test_navigate_with_typed_params(self):
        response = self.client.post(
            reverse("storefront:navigate"),
            {"page": "developer", "params": {"developer_id": "ai-genix", "developer_name": "AI Genix"}},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["view"]["params"]["developer_id"], "ai-genix")

    def test_navigate_rejects_unknown_params(self):
        response = self.client.post(
            reverse("storefront:navigate"), {"page": "home", "params": {"id": "1"}}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_guarded_navigation(self):
        response = self.client.post(reverse("storefront:navigate"), {"page": "developer-dashboard"}, format="json")

        self.assertEqual(response.data["requested"]["page"], "developer-dashboard")
        self.assertEqual(response.data["view"], {"page": "auth", "params": {"initial_form": "login"}})

    def test_dismiss_notification(self):
        self.add_to_cart("svc-1")

        response = self.client.delete(reverse("storefront:notification"))

        self.assertIsNone(response.data["notification"])


class CartViewTest(StorefrontAPITestCase):
    def test_add_item(self):
        response = self.add_to_cart("svc-1")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["cart"]["itemCount"], 1)
        self.assertEqual(Decimal(response.data["cart"]["subtotal"]), Decimal("49.99"))
        self.assertEqual(response.data["notification"]["text"], "'Landing Page Kit' added to cart!")

    def test_cart_persists_across_requests(self):
        self.add_to_cart("svc-1")
        self.add_to_cart("svc-1")

        response = self.client.get(reverse("storefront:cart"))

        self.assertEqual(response.data["cart"]["items"][0]["quantity"], 2)
        self.assertEqual(Decimal(response.data["cart"]["subtotal"]), Decimal("99.98"))

    def test_update_and_remove(self):
        self.add_to_cart("svc-1")
        url = reverse("storefront:cart-item-detail", kwargs={"item_id": "svc-1"})

        response = self.client.patch(url, {"quantity": 3}, format="json")
        self.assertEqual(response.data["cart"]["itemCount"], 3)

        response = self.client.delete(url)
        self.assertEqual(response.data["cart"]["items"], [])

    def test_add_unknown_item(self):
        response = self.add_to_cart("svc-404")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_add_from_sample_catalog_when_remote_is_down(self):
        self.data.failing_reads.add("services")

        response = self.add_to_cart("svc-4")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["cart"]["itemCount"], 1)

    def test_clear(self):
        self.add_to_cart("svc-1")
        response = self.client.delete(reverse("storefront:cart"))
        self.assertEqual(response.data["cart"]["itemCount"], 0)

    def test_malformed_cart_cookie_is_ignored(self):
        session = self.client.session
        session["cart"] = "{broken"
        session.save()
        self.client.cookies["sessionid"] = session.session_key

        response = self.client.get(reverse("storefront:cart"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["cart"]["items"], [])


class CheckoutViewTest(StorefrontAPITestCase):
    def test_checkout_requires_sign_in(self):
        self.add_to_cart("svc-1")

        response = self.client.post(reverse("storefront:checkout"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["view"]["page"], "auth")
        self.assertEqual(response.data["cart"]["itemCount"], 1)

    def test_checkout_empty_cart(self):
        self.sign_in()
        response = self.client.post(reverse("storefront:checkout"))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_checkout(self):
        self.sign_in()
        self.add_to_cart("svc-1")
        self.add_to_cart("svc-4")

        response = self.client.post(reverse("storefront:checkout"))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["redirect"]["page"], "customer-dashboard")
        self.assertEqual(response.data["cart"]["itemCount"], 0)
        self.assertEqual(len(self.data.rows("orders")), 2)

        dashboard = self.client.get(reverse("storefront:customer-dashboard"))
        self.assertEqual({s["id"] for s in dashboard.data["purchased"]}, {"svc-1", "svc-4"})

    def test_checkout_failure_keeps_cart(self):
        self.sign_in()
        self.add_to_cart("svc-1")
        self.data.failing_writes.add("orders")

        response = self.client.post(reverse("storefront:checkout"))

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data["cart"]["itemCount"], 1)
        self.assertTrue(response.data["notification"]["text"].startswith("Checkout failed:"))


class AuthViewTest(StorefrontAPITestCase):
    def test_sign_in_failure(self):
        response = self.client.post(
            reverse("storefront:sign-in"), {"email": "buyer@example.com", "password": "nope"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["notification"]["kind"], "error")

    def test_sign_up(self):
        response = self.client.post(
            reverse("storefront:sign-up"),
            {"full_name": "New", "email": "new@example.com", "password": "pw123456", "user_type": "customer"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_oauth_url(self):
        response = self.client.get(reverse("storefront:oauth-url", kwargs={"provider": "google"}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("provider=google", response.data["url"])

    def test_sign_out(self):
        self.sign_in()

        response = self.client.post(reverse("storefront:sign-out"))

        self.assertEqual(response.data["state"], "anonymous")
        session = self.client.get(reverse("storefront:session"))
        self.assertEqual(session.data["state"], "anonymous")


class CatalogViewTest(StorefrontAPITestCase):
    def test_search(self):
        response = self.client.get(reverse("storefront:service-list"), {"q": "landing"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([s["id"] for s in response.data["services"]], ["svc-1"])
        self.assertFalse(response.data["sample"])

    def test_pagination(self):
        response = self.client.get(reverse("storefront:service-list"), {"page": "2"})

        self.assertEqual(response.data["pagination"]["page"], 2)
        self.assertEqual(len(response.data["services"]), 3)

    def test_sample_fallback(self):
        self.data.failing_reads.add("services")

        response = self.client.get(reverse("storefront:service-list"))

        self.assertTrue(response.data["sample"])
        self.assertEqual(response.data["notification"]["text"], "Could not load services, showing sample data.")

    def test_category_services(self):
        url = reverse("storefront:category-services", kwargs={"category_name": "Agentic AI"})
        response = self.client.get(url, {"price_max": "abc"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(all(s["category"] == "Agentic AI" for s in response.data["services"]))

    def test_unknown_category(self):
        url = reverse("storefront:category-services", kwargs={"category_name": "Games"})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_developer_directory(self):
        response = self.client.get(reverse("storefront:developer-list"))
        ids = [d["developer_id"] for d in response.data["developers"]]
        self.assertEqual(len(ids), len(set(ids)))

    def test_developer_profile(self):
        response = self.client.get(reverse("storefront:developer-profile", kwargs={"developer_id": "ai-genix"}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["developer"]["bio"], "This developer has not added a bio yet.")
        self.assertFalse(response.data["can_review"])

    def test_review_after_purchase(self):
        self.sign_in()
        self.add_to_cart("svc-4")
        self.client.post(reverse("storefront:checkout"))
        url = reverse("storefront:developer-reviews", kwargs={"developer_id": "ai-genix"})

        response = self.client.post(url, {"rating": 5, "comment": "Excellent agents"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["notification"]["text"], "Thank you for your review!")
        profile = self.client.get(reverse("storefront:developer-profile", kwargs={"developer_id": "ai-genix"}))
        self.assertEqual(profile.data["reviews"][0]["comment"], "Excellent agents")

    def test_review_without_purchase(self):
        self.sign_in()
        url = reverse("storefront:developer-reviews", kwargs={"developer_id": "ai-genix"})

        response = self.client.post(url, {"rating": 5, "comment": "Hi"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class DashboardViewTest(StorefrontAPITestCase):
    def test_customer_dashboard_requires_sign_in(self):
        response = self.client.get(reverse("storefront:customer-dashboard"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["notification"]["text"], "You must be logged in to view your dashboard.")

    def test_developer_dashboard_is_for_sellers(self):
        self.sign_in()
        response = self.client.get(reverse("storefront:developer-dashboard"))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_publish_and_delete_listing(self):
        self.sign_in("dev@example.com")

        created = self.client.post(
            reverse("storefront:listing-create"),
            {"title": "Invoice Bot", "price": "19.99", "category": "Agentic AI", "description": "Bills"},
            format="json",
        )
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(created.data["notification"]["text"], 'Service "Invoice Bot" created successfully!')

        dashboard = self.client.get(reverse("storefront:developer-dashboard"))
        self.assertEqual([s["title"] for s in dashboard.data["services"]], ["Invoice Bot"])

        service_id = created.data["service"]["id"]
        deleted = self.client.delete(reverse("storefront:developer-service-delete", kwargs={"service_id": service_id}))
        self.assertEqual(deleted.status_code, status.HTTP_200_OK)
        self.assertEqual(deleted.data["notification"]["text"], '"Invoice Bot" has been deleted.')

    def test_invalid_listing(self):
        self.sign_in("dev@example.com")

        response = self.client.post(
            reverse("storefront:listing-create"), {"title": "X", "price": "-3", "category": "Agentic AI"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Please enter a valid price.")

    def test_developer_settings(self):
        self.sign_in("dev@example.com")
        url = reverse("storefront:developer-settings")

        form = self.client.get(url).data["settings"]
        self.assertEqual(form["email"], "dev@example.com")

        response = self.client.put(url, {**form, "description": "Agents and more."}, format="json")
        self.assertEqual(response.data["notification"]["text"], "Profile updated successfully!")

        profile = self.client.get(reverse("storefront:developer-profile", kwargs={"developer_id": self.seller.user_id}))
        self.assertEqual(profile.data["developer"]["bio"], "Agents and more.")


class ContactAndChatViewTest(StorefrontAPITestCase):
    def test_contact(self):
        response = self.client.post(
            reverse("storefront:contact"), {"email": "me@example.com", "message": "Hello"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(self.data.rows("messages")), 1)

    def test_contact_requires_fields(self):
        response = self.client.post(reverse("storefront:contact"), {"email": "me@example.com"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_chat_conversation(self):
        self.assertEqual(len(self.client.get(reverse("storefront:chat")).data["messages"]), 1)

        response = self.client.post(reverse("storefront:chat"), {"message": "Hi"}, format="json")

        self.assertEqual(response.data["reply"]["text"], "You said: Hi")
        self.assertEqual(len(self.client.get(reverse("storefront:chat")).data["messages"]), 3)

        self.client.delete(reverse("storefront:chat"))
        self.assertEqual(len(self.client.get(reverse("storefront:chat")).data["messages"]), 1)


class ErrorBoundaryTest(StorefrontAPITestCase):
    @patch("storefront.api.views.catalog_views.developer_directory", side_effect=RuntimeError("boom"))
    def test_unexpected_error_offers_reload(self, _):
        response = self.client.get(reverse("storefront:developer-list"))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json()["recovery"], {"action": "reload", "label": "Refresh Page"})

    def test_context_failure_offers_reload(self):
        broken_auth = MagicMock()
        broken_auth.get_session.side_effect = ValueError("Expecting value: line 1 column 1")

        with patch.object(self.container, "auth", return_value=broken_auth):
            response = self.client.get(reverse("storefront:session"))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json()["recovery"], {"action": "reload", "label": "Refresh Page"})

    def test_metrics_endpoint(self):
        response = self.client.get(reverse("storefront:storefront-metrics"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn(b"storefront_session_resolutions_total", response.content)

import pytest

from storefront.domain.navigation import (
    PAGES,
    AuthPage,
    CategoryPage,
    ContactPage,
    DeveloperProfilePage,
    HomePage,
    ServiceManagementPage,
    page_from_dict,
    page_to_dict,
)


@pytest.mark.unit
class TestPages:
    def test_every_page_name_is_unique(self):
        assert len(PAGES) == 16

    def test_typed_parameters(self):
        params = {"developer_id": "ai-genix", "developer_name": "AI Genix"}
        page = page_from_dict({"page": "developer", "params": params})
        assert page == DeveloperProfilePage(developer_id="ai-genix", developer_name="AI Genix")

    def test_parameterless_page(self):
        assert page_from_dict({"page": "home"}) == HomePage()

    def test_to_dict(self):
        assert page_to_dict(ContactPage(developer_id="dev-craft")) == {
            "page": "contact",
            "params": {"developer_id": "dev-craft", "developer_name": None},
        }
        assert page_to_dict(HomePage()) == {"page": "home", "params": {}}

    @pytest.mark.parametrize(
        "payload",
        [
            {"page": "admin"},
            {"page": "home", "params": {"query": "x"}},
            {"page": "developer", "params": {}},
            {"page": "category", "params": {"category_name": "  "}},
            {"page": "auth", "params": {"initial_form": "register"}},
            {"page": "service-management", "params": {"service_id": 12}},
            {"page": "search", "params": ["q"]},
            "home",
        ],
    )
    def test_rejects_invalid_payloads(self, payload):
        with pytest.raises(ValueError):
            page_from_dict(payload)

    def test_required_parameters_are_checked_on_construction(self):
        with pytest.raises(ValueError):
            CategoryPage()

    def test_optional_parameters(self):
        assert ServiceManagementPage().service_id is None
        assert AuthPage().initial_form == "login"

# Storefront API Views

# Utils package for the OWSCORP storefront

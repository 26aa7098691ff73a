# Storefront catalog & cart state engine

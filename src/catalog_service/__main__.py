from catalog_service.api.app import main

main()

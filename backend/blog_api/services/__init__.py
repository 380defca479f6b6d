# Services package init
"""
Blog API — Services Layer
==========================

Service Inventory:
    - PostService: validation and orchestration for the /posts resource
    - PostStore: persistence gateway over the `posts` table
    - serialization: pure storage → wire mapping (author flattening, timestamps)

PostService receives its PostStore per call; PostStore receives its
AsyncSession at construction. Neither keeps state between requests.
"""

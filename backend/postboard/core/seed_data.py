# postboard/core/seed_data.py
"""Baseline rows inserted by the bootstrap into an empty store."""

SEED_ACCOUNTS = [
    {"username": "johndoe", "email": "john@example.com", "password": "password123"},
    {"username": "janedoe", "email": "jane@example.com", "password": "password456"},
]

# Posts name their author by seed username; the id is looked up at seed time.
SEED_POSTS = [
    {
        "title": "Getting Started with Async Python",
        "content": "asyncio lets a single process juggle thousands of sockets. "
                   "Coroutines hand control back to the event loop whenever they wait on I/O.",
        "author": "johndoe",
    },
    {
        "title": "Understanding FastAPI Dependencies",
        "content": "FastAPI resolves dependencies per request, which makes them a natural place "
                   "for authentication, database sessions and other request-scoped resources.",
        "author": "johndoe",
    },
    {
        "title": "Relational Database Best Practices",
        "content": "Use parameterized queries, index the columns you filter on, and let the database "
                   "enforce uniqueness and foreign keys instead of checking them in application code.",
        "author": "janedoe",
    },
    {
        "title": "REST API Design Principles",
        "content": "RESTful APIs should be stateless, cacheable, and follow standard HTTP methods. "
                   "Proper resource naming and status codes are essential.",
        "author": "janedoe",
    },
    {
        "title": "JWT Authentication Explained",
        "content": "JSON Web Tokens carry signed claims between parties. They consist of three parts: "
                   "header, payload, and signature.",
        "author": "johndoe",
    },
]

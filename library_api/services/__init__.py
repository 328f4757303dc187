"""
Services Package

Business logic kept apart from HTTP handling. Service functions take a
Session and return an ApiResponse/PagedResponse envelope; they never
raise for domain failures.

Current services:
- genres.py: genre queries, uniqueness and delete protection
- authors.py: author queries, name-pair uniqueness and delete protection
- books.py: book queries, ISBN uniqueness and author/genre reference checks
- pagination.py: page clamping, search filtering and row counting
- guards.py: storage error to INTERNAL envelope conversion
- rate_limiter.py: rate limiting with slowapi
"""

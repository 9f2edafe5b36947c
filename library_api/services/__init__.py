"""
Services Package

Business logic kept separate from HTTP handling so it can be
reused and tested without a client.

Current services:
- store.py: In-memory book store and demo seeding
- validation.py: Candidate book validation
- csv_import.py: CSV text to candidate books
- importer.py: Batch validate-and-insert
- rate_limiter.py: Rate limiting with slowapi
"""

"""
Service layer abstraction.

Each service encapsulates the business logic of a domain and is the
only place that talks to the database, so API handlers never issue
SQL themselves.
"""

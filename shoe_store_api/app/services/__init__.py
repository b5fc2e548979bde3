"""
Service layer abstraction.

Each service encapsulates business logic for one concern (CRUD,
search, rating).  Services receive the durable map explicitly and
return ``Ok``/``Err`` results, so API handlers only translate results
into HTTP responses.
"""

"""
Service layer abstraction.

Each service wraps the Cosmos DB client for one concern: documents
(``cosmos_service``) and account administration
(``cosmos_admin_service``).  Endpoints talk to services only and never
import the Azure SDK.
"""

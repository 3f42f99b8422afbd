"""Operations layer for the hiring assistant API.

This package handles API-facing operations:
- Collection lookup (CollectionRegistry)
- Vector store provisioning (IndexProvisioner)
- File upload/listing/deletion (FileLifecycleManager, OrphanCleaner)
- Query dispatch and text extraction (QueryDispatcher, response_normalizer)
- Training recommendations (RecommendationService)

Principles:
- Single Responsibility Principle
- Dependency Injection
"""

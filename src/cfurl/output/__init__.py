"""Output rendering for ServiceResult."""

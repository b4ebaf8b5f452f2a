from bloglist.auth.guard import authorize_delete, canonical_id, is_owner

__all__ = ["authorize_delete", "canonical_id", "is_owner"]

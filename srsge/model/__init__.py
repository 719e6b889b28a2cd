"""Save header model classes."""

from srsge.model.record import FIELDS, RECORD_END, SaveRecord

__all__ = ['FIELDS', 'RECORD_END', 'SaveRecord']

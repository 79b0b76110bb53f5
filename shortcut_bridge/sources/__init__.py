from .base import InstallRecord, records_to_entries

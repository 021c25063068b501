"""Workers that drive career ingestion."""

"""Harbor - internal CRM."""

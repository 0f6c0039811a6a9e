"""Connectors por integração: adapters de borda para APIs externas.

Estrutura:
- compulife/: cotação de seguro de vida (whitelist + ações)
- ghl/: GoHighLevel CRM
- anthropic/: Messages API (leitura de lead card)
- vision/: Google Vision OCR
- supabase/: Supabase Storage

O Google Drive vive em app/infra/google (SDK síncrono + token OAuth).
"""

__all__: list[str] = []

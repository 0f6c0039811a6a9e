"""App: composição, infraestrutura e observabilidade do relay.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, conectores)
- infra/: implementações concretas de IO (HTTP upstream, Google)
- observability/: correlation id e middleware de request

Padrão: app executa; api adapta; config configura.
"""

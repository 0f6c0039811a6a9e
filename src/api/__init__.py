"""API: camada de borda com rotas HTTP e adapters das integrações.

Responsabilidades:
- Receber requests do browser (ferramenta de cotação)
- Validar corpos e parâmetros antes de qualquer chamada externa
- Traduzir requests para o formato de cada serviço externo
- Propagar respostas upstream sem expor credenciais

Subpastas:
- connectors/: adapters HTTP por integração
- validators/: validação de payloads (base64)
- routes/: endpoints HTTP por integração

NÃO PODE conter: leitura de variáveis de ambiente (use config.settings).
"""

"""API — camada de borda sobre o motor de validação.

Responsabilidades:
- Montar o payload plano a partir de body, query e path
- Invocar o motor e devolver os dados sanitizados ao handler
- Converter falha agregada em resposta HTTP

Subpastas:
- validation/: adaptador de fronteira (merge, dependência, handler de erro)
- routes/: endpoints HTTP (health, validação)

NÃO PODE conter: regras de validação, checkers ou schemas.
"""

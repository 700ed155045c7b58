"""App — composição do serviço HTTP sobre o motor de validação.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- observability/: correlation_id por requisição

Padrão: validation valida; api adapta; app compõe; config configura.
"""

"""
Controllers - Camada de controle para endpoints da API.

Cada controller é responsável por uma ação específica (cadastrar,
atualizar, ativar, buscar). Recebem o payload e o Principal explicitamente
e deixam as exceções subirem para os handlers em app/errors.py.

Estrutura:
- api/v1/cheques/: Controllers de cheques
- api/v1/financeiros/: Controllers de lançamentos financeiros
"""

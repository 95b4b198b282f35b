"""
Configuração do projeto Cinema Tickets.

Módulos:
- settings: Configurações via variáveis de ambiente
- log_config: Aplicação da configuração de logging
- container: Dependency Injection Container
"""

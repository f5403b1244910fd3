# src/template_literals/core/__init__.py
"""
Core do template-literals.

Componentes principais:
    - config → carregamento da config base, overrides `caminho=valor`,
               congelamento e hashing
    - build  → registro, renderização paralela e escrita de templates
    - errors → payload canônico de erros reportados ao operador

Princípios fundamentais:
    - A configuração é montada inteira e congelada antes da renderização
    - Falhas de configuração abortam o build; falhas de template não
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado

Limites explícitos:
    - Não depende da CLI (a CLI depende do core)
"""

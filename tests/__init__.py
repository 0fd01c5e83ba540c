"""
Набор тестов strdecimal-calc

Содержит:
- tests/unit/          : Unit тесты десятичного движка, контрактов и драйвера калькулятора
"""

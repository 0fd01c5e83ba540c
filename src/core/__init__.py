"""
Ядро десятичного движка: доменная модель, арифметика над строками цифр, контракты.

Пакет чистый: без I/O, без логирования, без общего изменяемого состояния.
"""

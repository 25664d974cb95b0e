"""
base — нейтральный слой инфраструктуры.

Назначение:
- выбрать транспорт (plugin или local) через runtime
- дать единый HTTP-транспорт и сборку URL (net)
- дать единое логирование (log)
"""

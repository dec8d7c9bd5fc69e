"""App - coração do sistema: domínio, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de evento e relatório de sincronização
- use_cases/: casos de uso (preview, checagem de duplicados, sync)
- services/: normalização, deduplicação e orquestração do lote
- infra/: implementações concretas de IO (Google Calendar, OpenAI)
- protocols/: contratos/interfaces
- observability/: logs estruturados, correlation_id, métricas

Padrão: app executa; ai extrai; config configura; utils apoia.
"""

"""Feed Application.

Clean Architecture 기반 지역 비즈니스 숏폼 피드 서비스입니다.

Layers:
    - domain/: 순수 비즈니스 로직 (좌표, 카테고리, 커서, 거리 계산)
    - application/: Use Cases (Queries)
    - infrastructure/: 외부 시스템 연결 (PostgreSQL, In-Memory, Prometheus)
    - presentation/: HTTP 인터페이스
    - setup/: 설정 및 의존성 주입
"""

__version__ = "1.0.0"

"""GitHub 저장소의 오픈소스 기여 기회를 찾아주는 도구."""

__version__ = "0.1.0"

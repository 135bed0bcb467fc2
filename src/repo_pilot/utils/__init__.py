"""유틸리티 모듈."""

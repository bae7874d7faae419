from coursehub.health.router import router


__all__ = ["router"]

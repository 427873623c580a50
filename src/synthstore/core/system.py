import shutil


class DiskGuard:
    """
    Protege el sistema de llenarse el disco.
    Define umbrales de seguridad.
    """
    @staticmethod
    def check_space(estimated_bytes: int, threshold_gb: float = 1, path: str = ".") -> bool:
        """
        Verifica si hay suficiente espacio libre (threshold + estimado).
        """
        free_bytes = shutil.disk_usage(path).free
        needed_bytes = estimated_bytes + int(threshold_gb * 1024**3)
        return free_bytes >= needed_bytes

    @staticmethod
    def estimate_size(rows: int, avg_row_bytes: int = 64) -> int:
        return rows * avg_row_bytes

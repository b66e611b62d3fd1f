"""
JSON export for mtrtrace
"""

import json
import math
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..models import HopRecord, TraceResult
from .. import __version__


class JsonExporter:
    """
    Export trace results to JSON format.

    Output format is designed to be both human-readable
    and machine-parseable.
    """

    def export(self, result: TraceResult,
               output_path: Optional[Path] = None) -> dict:
        """
        Export trace result to JSON.

        Args:
            result: Trace result
            output_path: Optional file path to write

        Returns:
            JSON-serializable dict
        """
        data = {
            "meta": {
                "version": __version__,
                "generator": "mtrtrace",
                "generated_at": datetime.now().isoformat()
            },
            "target": result.target,
            "args": list(result.args),
            "timestamp": result.timestamp.isoformat(),
            "reached": result.reached,
            "total_hops": result.total_hops,
            "hops": [self._serialize_hop(hop) for hop in result.hops],
        }

        if output_path:
            self._write_file(data, output_path)

        return data

    def _serialize_hop(self, hop: HopRecord) -> dict:
        """Serialize a single hop"""
        return {
            "number": hop.number,
            "ip": hop.ip,
            "hostname": hop.hostname,
            # NaN marks an unparseable sample and is not valid JSON
            "rtts": [r if math.isfinite(r) else None for r in hop.rtts],
            "rtt_min": _round(hop.rtt_min),
            "rtt_avg": _round(hop.rtt_avg),
            "rtt_max": _round(hop.rtt_max),
        }

    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


def _round(value: Optional[float]) -> Optional[float]:
    return round(value, 3) if value is not None else None


def export_json(result: TraceResult,
                output_path: Optional[Path] = None) -> dict:
    """Convenience function for JSON export"""
    exporter = JsonExporter()
    return exporter.export(result, output_path)

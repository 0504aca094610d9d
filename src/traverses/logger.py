import hashlib
import os
import pickle
import random
import string
import sys
from typing import Any, Dict, List, Optional, Tuple

__init_params: Dict[str, Any] = {}
__run_id: Optional[str] = None


def eprint(*args, guard: bool = True, **kwargs):
    if guard:
        print(*args, file=sys.stderr, **kwargs)
        sys.stderr.flush()


def init_logger(init_args: Dict[str, Any]):
    global __init_params
    global __run_id
    __init_params = dict(init_args)
    __run_id = "run_" + ''.join(random.choice(string.digits + string.ascii_letters) for _ in range(6))


def run_id() -> Optional[str]:
    return __run_id


def init_params() -> Dict[str, Any]:
    return __init_params.copy()


def dict_digest(d: Dict):
    string = str(sorted(list(d.items()), key=lambda x: x[0]))
    return hashlib.sha224(bytes(string, 'utf-8')).hexdigest()


def _append_to_file(filename, key, what):
    data = (key, what)
    with open(filename, "ab") as f:
        pickle.dump(data, f)


def read_metrics(filename) -> List[Tuple[str, Any]]:
    """All (name, value) records of the file, in the order they were logged"""
    data: List[Tuple[str, Any]] = []
    if not os.path.exists(filename):
        return data
    with open(filename, 'rb') as fr:
        try:
            while True:
                data.append(pickle.load(fr))
        except EOFError:
            pass
    return data


def log_metric(filename, metric_name: str, metric_value):
    _append_to_file(filename, metric_name, metric_value)


def log_metrics(filename, metrics: Dict):
    for metric_name, metric_value in metrics.items():
        log_metric(filename, metric_name, metric_value)


def log_run_header(filename):
    """Records run id and digest of the parameters given to init_logger"""
    log_metrics(filename, {
        "run_id": run_id(),
        "params_digest": dict_digest(__init_params)[:10],
    })

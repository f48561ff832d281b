from typing import Any


SAMPLE_TASKS: list[dict[str, Any]] = [
    {
        "title": "Set up Minikube cluster",
        "tag": "devops",
        "status": "done",
        "priority": "high",
    },
    {
        "title": "Configure Argo Rollouts",
        "tag": "devops",
        "status": "in-progress",
        "priority": "high",
    },
    {
        "title": "Write unit tests",
        "tag": "dev",
        "status": "in-progress",
        "priority": "medium",
    },
    {
        "title": "Set up SonarCloud quality gate",
        "tag": "quality",
        "status": "todo",
        "priority": "medium",
    },
    {
        "title": "Configure Grafana dashboards",
        "tag": "monitor",
        "status": "todo",
        "priority": "high",
    },
]

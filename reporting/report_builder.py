import json

from jinja2 import Template

REPORT_TEMPLATE = Template("""
# Terraform Tag Hunter - Missing Tags Report

## Summary
**Resources checked:** {{ resources_checked }}
**Resources missing tags:** {{ issues|length }}

## Missing Tags
{% for i in issues %}
- **{{ i.address }}** ({{ i.severity }}, {{ i.location }}): {{ i.message }}
{% endfor %}
{% if issues|length == 0 %}
- None detected
{% endif %}
""")


def build_report(issues, resources_checked):
    return REPORT_TEMPLATE.render(
        issues=issues,
        resources_checked=resources_checked,
    )


def build_json_report(issues, resources_checked):
    return json.dumps(
        {
            "resources_checked": resources_checked,
            "issues": [
                {
                    "rule": i["rule"],
                    "severity": i["severity"],
                    "type": i["type"],
                    "address": i["address"],
                    "missing_tags": list(i["missing_tags"]),
                    "message": i["message"],
                    "location": str(i["location"]) if i["location"] is not None else None,
                }
                for i in issues
            ],
        },
        indent=2,
    )

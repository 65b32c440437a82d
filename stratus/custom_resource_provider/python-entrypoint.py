"""
Entrypoint wrapper for Python custom resource providers.

Copied next to the user's index.py as __entrypoint__.py. Calls the user
handler and reports the outcome to the pre-signed CloudFormation response URL.
Runs inside Lambda, so only the standard library is available.
"""

import json
import logging
import urllib.request

logger = logging.getLogger()
logger.setLevel(logging.INFO)

CREATE_FAILED_PHYSICAL_ID_MARKER = "Stratus::CustomResourceProvider::CREATE_FAILED"
MISSING_PHYSICAL_ID_MARKER = "Stratus::CustomResourceProvider::MISSING_PHYSICAL_ID"


def handler(event, context):
    sanitized_event = {**event, "ResponseURL": "..."}
    logger.info(json.dumps(sanitized_event, indent=2))

    # a failed create leaves nothing to delete
    if (
        event["RequestType"] == "Delete"
        and event.get("PhysicalResourceId") == CREATE_FAILED_PHYSICAL_ID_MARKER
    ):
        submit_response("SUCCESS", event)
        return

    try:
        import index

        result = index.handler(sanitized_event, context) or {}
    except Exception as e:
        logger.exception("Handler failed")
        submit_response("FAILED", {
            **event,
            "Reason": str(e),
            "PhysicalResourceId": event.get("PhysicalResourceId") or CREATE_FAILED_PHYSICAL_ID_MARKER,
        })
        return

    physical_resource_id = (
        result.get("PhysicalResourceId")
        or event.get("PhysicalResourceId")
        or (event["RequestId"] if event["RequestType"] == "Create" else MISSING_PHYSICAL_ID_MARKER)
    )
    submit_response("SUCCESS", {
        **event,
        "PhysicalResourceId": physical_resource_id,
        "Data": result.get("Data"),
        "NoEcho": result.get("NoEcho"),
    })


def submit_response(status, event):
    body = json.dumps({
        "Status": status,
        "Reason": event.get("Reason") or status,
        "StackId": event["StackId"],
        "RequestId": event["RequestId"],
        "PhysicalResourceId": event.get("PhysicalResourceId") or MISSING_PHYSICAL_ID_MARKER,
        "LogicalResourceId": event["LogicalResourceId"],
        "NoEcho": event.get("NoEcho"),
        "Data": event.get("Data"),
    }).encode("utf-8")

    request = urllib.request.Request(
        event["ResponseURL"],
        data=body,
        method="PUT",
        headers={"content-type": "", "content-length": str(len(body))},
    )
    with urllib.request.urlopen(request) as response:
        logger.info("Response status: %s", response.status)

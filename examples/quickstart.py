# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from azure.identity import InteractiveBrowserCredential

from xrm_webapi import WebApiClient
from xrm_webapi.core.errors import HttpError, XrmWebApiError
from xrm_webapi.models.entity import Attribute, Entity
from xrm_webapi.models.function_input import FunctionInput


entered = input("Enter Dataverse org URL (e.g. https://yourorg.crm.dynamics.com): ").strip()
if not entered:
    print("No URL entered; exiting.")
    sys.exit(1)

base_url = entered.rstrip("/")
credential = InteractiveBrowserCredential()


def log_call(call: str) -> None:
    print({"call": call})


with WebApiClient(base_url, credential) as client:
    log_call("WhoAmI()")
    me = client.actions.unbound_function("WhoAmI").result()
    print({"UserId": me.get("UserId")})

    log_call("create accounts")
    entity = Entity().add("name", "Quickstart Account").add("telephone1", "555-0100")
    location = client.records.create("accounts", entity).result()
    account_id = location[location.rindex("(") + 1 : -1]
    print({"created": location})

    try:
        log_call("retrieve with formatted values")
        account = client.records.retrieve(
            "accounts", account_id, "$select=name,telephone1,createdon", include_formatted_values=True
        ).result()
        print(account)

        log_call("update_property telephone1")
        client.records.update_property("accounts", account_id, Attribute("telephone1", "555-0199")).result()

        log_call("delete_property telephone1")
        client.records.delete_property("accounts", account_id, Attribute("telephone1")).result()

        log_call("retrieve_multiple (page size 5)")
        page = client.records.retrieve_multiple("accounts", "$select=name&$top=5", max_page_size=5).result()
        print({"count": len(page.get("value", [])), "next": page.get("@odata.nextLink")})

        log_call("retrieve_multiple_dataframe")
        df = client.records.retrieve_multiple_dataframe("accounts", "$select=name,revenue&$top=5").result()
        print(df.head())

        log_call("RetrieveUserPrivileges (bound function)")
        privileges = client.actions.bound_function(
            "systemusers", me["UserId"], "RetrieveUserPrivileges"
        ).result()
        print({"privileges": len(privileges.get("RolePrivileges", []))})

        log_call("RetrieveTotalRecordCount with aliased input")
        counts = client.actions.unbound_function(
            "RetrieveTotalRecordCount", [FunctionInput("EntityNames", '["account"]', alias="p1")]
        )
        print(counts.result())
    except HttpError as ex:
        print({"status": ex.status_code, "error": ex.error})
    except XrmWebApiError as ex:
        print(ex.to_dict())
    finally:
        log_call("delete accounts")
        client.records.delete("accounts", account_id).result()

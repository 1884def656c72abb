"""
Application Commands.

Create, list and remove applications, grant and revoke team access,
and show application logs. Each command is one request against the
application management API.
"""

from appctl.cli.client import Transport
from appctl.cli.command import (
    Command,
    CommandInfo,
    ExecutionContext,
    build_request,
    decode,
    is_no_content,
    perform,
    read_body,
)
from appctl.cli.schemas import (
    AppCreateRequest,
    Application,
    ApplicationList,
    LogEntryList,
    StringMap,
)
from appctl.cli.table import Table
from appctl.core.utils import format_instant


class AppGrant(Command):
    """Grant a team access to an app."""

    def info(self) -> CommandInfo:
        return CommandInfo(
            name="app-grant",
            usage="app-grant <appname> <teamname>",
            desc="grants access to an app to a team.",
            min_args=2,
        )

    def run(self, context: ExecutionContext, client: Transport) -> None:
        app_name, team_name = context.args[0], context.args[1]
        request = build_request("PUT", client.url(f"/apps/{app_name}/{team_name}"))
        read_body(perform(client, request))
        context.stdout.write(f'Team "{team_name}" was added to the "{app_name}" app\n')


class AppRevoke(Command):
    """Revoke a team's access to an app."""

    def info(self) -> CommandInfo:
        return CommandInfo(
            name="app-revoke",
            usage="app-revoke <appname> <teamname>",
            desc="revokes access to an app from a team.",
            min_args=2,
        )

    def run(self, context: ExecutionContext, client: Transport) -> None:
        app_name, team_name = context.args[0], context.args[1]
        request = build_request("DELETE", client.url(f"/apps/{app_name}/{team_name}"))
        read_body(perform(client, request))
        context.stdout.write(f'Team "{team_name}" was removed from the "{app_name}" app\n')


class AppList(Command):
    """List every app visible to the user as a table."""

    headers = ("Application", "State", "Ip")

    def info(self) -> CommandInfo:
        return CommandInfo(
            name="app-list",
            usage="app-list",
            desc="list all your apps.",
        )

    def run(self, context: ExecutionContext, client: Transport) -> None:
        request = build_request("GET", client.url("/apps"))
        response = perform(client, request)
        if is_no_content(response):
            return
        apps = decode(ApplicationList, read_body(response), "app list")
        context.stdout.write(self.render(apps))

    def render(self, apps: list[Application]) -> str:
        """Render apps in the order received, first unit's address as Ip."""
        table = Table(self.headers)
        for app in apps:
            table.add_row([app.name, app.state, app.ip])
        return table.render()


class AppCreate(Command):
    """Create an app for a framework and report its repository."""

    def info(self) -> CommandInfo:
        return CommandInfo(
            name="app-create",
            usage="app-create <appname> <framework>",
            desc="create a new app.",
            min_args=2,
        )

    def run(self, context: ExecutionContext, client: Transport) -> None:
        app_name, framework = context.args[0], context.args[1]
        payload = AppCreateRequest(name=app_name, framework=framework)
        request = build_request("POST", client.url("/apps"), body=payload)
        out = decode(StringMap, read_body(perform(client, request)), "app creation result")
        repository = out.get("repository_url", "")
        context.stdout.write(f'App "{app_name}" successfully created!\n')
        context.stdout.write(f'Your repository for "{app_name}" project is "{repository}"\n')


class AppRemove(Command):
    """Remove an app."""

    def info(self) -> CommandInfo:
        return CommandInfo(
            name="app-remove",
            usage="app-remove <appname>",
            desc="removes an app.",
            min_args=1,
        )

    def run(self, context: ExecutionContext, client: Transport) -> None:
        app_name = context.args[0]
        request = build_request("DELETE", client.url(f"/apps/{app_name}"))
        read_body(perform(client, request))
        context.stdout.write(f'App "{app_name}" successfully removed!\n')


class AppLog(Command):
    """Print an app's log entries in the order the service returns them."""

    def info(self) -> CommandInfo:
        return CommandInfo(
            name="log",
            usage="log <appname>",
            desc="show logs for an app.",
            min_args=1,
        )

    def run(self, context: ExecutionContext, client: Transport) -> None:
        app_name = context.args[0]
        request = build_request("GET", client.url(f"/apps/{app_name}/log"))
        response = perform(client, request)
        if is_no_content(response):
            return
        entries = decode(LogEntryList, read_body(response), "app log")
        for entry in entries:
            context.stdout.write(f"{format_instant(entry.date)} - {entry.message}\n")

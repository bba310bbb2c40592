"""Terminal preview of a rendered invite."""

from rich.panel import Panel
from rich.table import Table

from weddings.render import InvitePage
from weddings_cli.display.console import console


class InviteRenderer:
    """Render an InvitePage region by region.

    Used by the show command to preview what a guest sees after unlocking:
    - Header (names, tagline, date, countdown)
    - Schedule cards with their links
    - RSVP, updates and contacts
    - Theme and decor summary
    """

    def render(self, page: InvitePage) -> None:
        self.render_header(page)
        self.render_schedule(page)
        self.render_rsvp(page)
        self.render_updates(page)
        self.render_contacts(page)
        self.render_presentation(page)
        console.print(f"\n[dim]Last updated {page.last_updated}[/dim]")

    def render_header(self, page: InvitePage) -> None:
        lines = [f"[bold]{page.couple_names}[/bold]"]
        if page.tagline:
            lines.append(page.tagline)
        if page.city_line:
            lines.append(f"[dim]{page.city_line}[/dim]")
        lines.append("")
        lines.append(page.wedding_date)
        lines.append(f"[yellow]{page.countdown.text}[/yellow]")
        console.print(Panel("\n".join(lines), expand=False))

        links = Table(show_header=False, box=None, padding=(0, 2))
        links.add_column("Label", style="dim", width=12)
        links.add_column("Value")
        if page.map_url:
            links.add_row("Map", page.map_url)
        links.add_row("Calendar", page.calendar_url)
        links.add_row("Subscribe", page.subscribe_url)
        console.print(links)

    def render_schedule(self, page: InvitePage) -> None:
        console.print("\n[bold cyan]Schedule[/bold cyan]")
        if not page.schedule:
            console.print("  [dim]No schedule entries[/dim]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="cyan")
        table.add_column("Title")
        table.add_column("When")
        table.add_column("Where")
        for card in page.schedule:
            table.add_row(card.entry_id, card.title, card.time_text, card.place)
        console.print(table)

    def render_rsvp(self, page: InvitePage) -> None:
        rsvp = page.rsvp
        if not rsvp.visible:
            return
        console.print(f"\n[bold cyan]{rsvp.title}[/bold cyan]")
        if rsvp.deadline_text:
            console.print(f"  {rsvp.deadline_text}")
        if rsvp.mode == "embed" and rsvp.embed_url:
            loading = "on first click" if rsvp.deferred_embed else "immediately"
            console.print(f"  Embedded form ({loading}): {rsvp.embed_url}")
        elif rsvp.button_visible:
            console.print(f"  {rsvp.button_text}: {rsvp.button_href}")
        if rsvp.new_tab_href:
            console.print(f"  [dim]{rsvp.new_tab_text}: {rsvp.new_tab_href}[/dim]")

    def render_updates(self, page: InvitePage) -> None:
        if not page.updates:
            return
        console.print("\n[bold cyan]Updates[/bold cyan]")
        for update in page.updates:
            console.print(f"  [dim]{update.when}[/dim]  {update.text}")

    def render_contacts(self, page: InvitePage) -> None:
        if not page.contacts:
            return
        console.print("\n[bold cyan]Contacts[/bold cyan]")
        for contact in page.contacts:
            console.print(f"  [bold]{contact.name}[/bold]{contact.detail}")

    def render_presentation(self, page: InvitePage) -> None:
        console.print("\n[bold cyan]Presentation[/bold cyan]")
        console.print(f"  Theme: {page.theme.class_attr or page.theme.style_attr or 'default'}")
        if page.decor.hidden:
            console.print("  Decor: hidden")
        else:
            rotations = ", ".join(
                f"{key}={corner.rotation:g}°"
                for key, corner in page.decor.corners.items()
                if not corner.hidden
            )
            opacity = next(c.opacity for c in page.decor.corners.values() if not c.hidden)
            console.print(f"  Decor: {rotations} (opacity {opacity:g})")
        if page.couple_photo:
            console.print(f"  Photo: {page.couple_photo.src} ({page.couple_photo.size:g}px)")

"""Night action resolution - applies role abilities and computes information."""

import logging
from typing import Callable, Optional

from grimoire.engine.game_state import Game
from grimoire.engine.neighbors import living_neighbors
from grimoire.handlers import ActionResult, get_handler
from grimoire.models.player import EVIL_TYPES, Player, RoleType

logger = logging.getLogger(__name__)

MALFUNCTION_MARK = "(FALSE - malfunctioning)"

# Given the true Empath count, produce the number a malfunctioning Empath is told
FalseReading = Callable[[int], int]


def shifted_reading(count: int) -> int:
    """Default false Empath reading: the next value in 0 -> 1 -> 2 -> 0."""
    return (count + 1) % 3


class FortuneReading(ActionResult):
    """Fortune Teller outcome. result is always the true answer."""

    result: bool = False
    malfunctioning: bool = False


class EmpathReading(ActionResult):
    """Empath outcome: the true count and the number to show the player."""

    count: int = 0
    reported: int = 0
    malfunctioning: bool = False


class NightActionResolver:
    """Applies night abilities to a game.

    Ability effects are dispatched through the handler registry by the
    acting role's name. Information roles (Fortune Teller, Empath, info
    tokens) have dedicated entry points because they need more than one
    target or none at all.

    Malfunction never changes what is computed; it only marks results
    as unreliable. Deciding what lie to tell is left to the Storyteller,
    except for the Empath where false_reading supplies a number.

    Information checks read the type of the role a player holds. With
    honor_registration, a player's registration_override is used instead.
    """

    def __init__(
        self,
        false_reading: Optional[FalseReading] = None,
        honor_registration: bool = False,
    ):
        """Initialize the resolver.

        Args:
            false_reading: Strategy producing a malfunctioning Empath's
                           number from the true count. Defaults to
                           shifted_reading.
            honor_registration: Let registration overrides (e.g. a Recluse
                                registering as a Demon) decide what the
                                Fortune Teller and Empath see.
        """
        self._false_reading = false_reading or shifted_reading
        self._honor_registration = honor_registration

    def type_seen(self, player: Player) -> Optional[RoleType]:
        """Category an information ability sees for a player."""
        if self._honor_registration:
            return player.registered_type
        return player.role.type if player.role else None

    def resolve_night_action(self, game: Game, actor_name: str, target: Player) -> ActionResult:
        """Apply a single-target ability.

        Args:
            game: Game containing the actor and target.
            actor_name: Name of the acting role; the first player holding it acts.
            target: Chosen player.

        Returns:
            ActionResult describing the effect, or a failed result if no
            player holds actor_name.
        """
        actor = game.find_player_by_role(actor_name)
        if actor is None:
            return ActionResult.error(f"Actor {actor_name} not found")

        message = get_handler(actor_name).act(game, actor, target)
        logger.debug("Resolved %s -> %s: %s", actor_name, target.name, message)
        return ActionResult(message=message)

    def resolve_info_action(
        self,
        game: Game,
        actor_name: str,
        first: Player,
        second: Player,
        role_name: str,
    ) -> ActionResult:
        """Record an info token: "first or second is role_name".

        A malfunctioning actor gets "(False Info)" appended; the role text
        is left exactly as the Storyteller chose it.
        """
        actor = game.find_player_by_role(actor_name)
        if actor is None:
            return ActionResult.error(f"Actor {actor_name} not found")

        message = f"{actor_name} learned that {first.name} or {second.name} is {role_name}"
        if actor.is_malfunctioning:
            message += " (False Info)"
        return ActionResult(message=message)

    def is_demon_or_red_herring(self, player: Optional[Player]) -> bool:
        """Whether the Fortune Teller should see this player as a Demon."""
        if player is None:
            return False
        if self.type_seen(player) == RoleType.DEMON:
            return True
        return player.is_red_herring

    def resolve_fortune_teller(
        self,
        game: Game,
        actor: Optional[Player],
        first: Player,
        second: Player,
    ) -> FortuneReading:
        """Answer "is either of these players the Demon?".

        The boolean is always the true answer. A malfunctioning actor only
        adds an advisory mark to the message.
        """
        if actor is None:
            return FortuneReading.error("Actor not found")

        result = self.is_demon_or_red_herring(first) or self.is_demon_or_red_herring(second)
        message = f"Fortune Teller checked {first.name} & {second.name}. Result: {'YES' if result else 'NO'}"
        if actor.is_malfunctioning:
            message += f" {MALFUNCTION_MARK}"

        return FortuneReading(
            message=message,
            result=result,
            malfunctioning=actor.is_malfunctioning,
        )

    def get_empath_info(self, game: Game, empath: Player) -> EmpathReading:
        """Count evil players among the Empath's two living neighbors.

        If both directions land on the same player (only two alive), that
        player is counted once.
        """
        seat = game.seat_of(empath)
        if seat is None:
            return EmpathReading.error("Empath not found")

        clockwise, counter_clockwise = living_neighbors(game.players, seat)
        if clockwise is None or counter_clockwise is None:
            return EmpathReading(message="Not enough neighbors", success=False)

        count = 0
        if self.type_seen(clockwise) in EVIL_TYPES:
            count += 1
        if counter_clockwise is not clockwise and self.type_seen(counter_clockwise) in EVIL_TYPES:
            count += 1

        if empath.is_malfunctioning:
            reported = self._false_reading(count)
            return EmpathReading(
                message=f"Reading: {reported} {MALFUNCTION_MARK}",
                count=count,
                reported=reported,
                malfunctioning=True,
            )

        return EmpathReading(message=f"Reading: {count}", count=count, reported=count)

    def reveal_choices(
        self,
        game: Game,
        actor_name: str,
        first: Player,
        second: Player,
    ) -> list[str]:
        """Roles the Storyteller may reveal for an info token.

        Prefers the roles actually held by the two chosen players when they
        match the actor's category. Falls back to every script role of that
        category, or to the whole script for roles without one.
        """
        reveal_type = get_handler(actor_name).reveal_type
        if reveal_type is None:
            return game.script.role_names()

        choices: list[str] = []
        for player in (first, second):
            if player.role is not None and player.role.type == reveal_type:
                if player.role_name not in choices:
                    choices.append(player.role_name)

        if choices:
            return choices
        return [role.name for role in game.script.roles_of_type(reveal_type)]

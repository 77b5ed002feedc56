"""
Editorial content shown when a node is clicked.

Each curated node identity maps to an invented word, its part of speech and
a short essay. Identities without a curated word fall back to a generic card
showing the node number and its current position.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """A card of text for the modal."""

    title: str
    paragraphs: tuple[str, ...] = ()
    part_of_speech: str | None = None  # e.g. "n."; rendered bold before the first paragraph
    credit: str | None = None  # Trailing attribution line
    is_curated: bool = True  # False for the generated position card

    def lines(self) -> list[str]:
        """Flatten the card into display lines (title first)."""
        out = [self.title]
        for i, paragraph in enumerate(self.paragraphs):
            if i == 0 and self.part_of_speech:
                out.append(f"{self.part_of_speech} {paragraph}")
            else:
                out.append(paragraph)
        if self.credit:
            out.append(self.credit)
        return out


AI_CREDIT = "created by AI"


ENTRIES: dict[int, Entry] = {
    1: Entry(
        title="avatar",
        part_of_speech="n.",
        paragraphs=(
            "google's ai overview: \"An avatar is a figure that represents a person in a "
            "digital space, like a video game or chatroom, but it also has an older meaning "
            "from Hinduism, where it refers to the descent of a deity to earth in a physical "
            "form\"",
            "how can we redefine what avatar means in the physical world? Avatars are commonly "
            "associated with digital entities, but what if we could bring that avatar into the "
            "flesh or some blend of mixed reality? avatars could start to represent the goals we "
            "have for ourselves, the person we want to grow into, the person we were, the version "
            "of us that died, you name it.",
        ),
    ),
    2: Entry(
        title="sonder",
        part_of_speech="n.",
        paragraphs=(
            "The realization that each random passerby is living a life as vivid and complex as "
            "your own—populated with their own ambitions, friends, routines, worries and "
            "inherited craziness—an epic story that continues invisibly around you like an "
            "anthill sprawling deep underground, with elaborate passageways to thousands of other "
            "lives that you'll never know existed, in which you might appear only once, as an "
            "extra sipping coffee in the background, as a blur of traffic passing on the highway, "
            "as a lighted window at dusk.",
            "from The Dictionary of Obscure Sorrows, a compendium of invented words for emotions "
            "written by John Koeing",
        ),
        credit="Varda",
    ),
    3: Entry(
        title="group",
        part_of_speech="n.",
        paragraphs=(
            "(or a verb honestly) there's an innate human desire to categorize and associate "
            "entities with one another. we've often done this by religion, ethnicity, background, "
            "status… you name it. could this be limiting our ability to connect with people "
            "from different corners of the world? what if we could remove this notion to "
            "'group'—rather see yourself as a connection to every human on the planet. you're "
            "a part of this giant web and have 8.3 billion connections bouncing off of you. while "
            "some of the connections you're naturally closer to, you can be connected to any and "
            "everyone imaginable.",
        ),
    ),
    4: Entry(
        title="sensea",
        part_of_speech="n.",
        paragraphs=(
            "it's the feeling of sensing another person's energy, soul, 'aura'. we've discretely "
            "boxed our senses into 5—sight, smell, hearing, touch, and taste. we also have "
            "vocabulary to describe strong emotions such as love, anxiety, melancholy, and more. "
            "however, the experience of meeting a new person, and instantly imagining how they "
            "live their life, what their values are, what kind of future you envision they'll "
            "have—that's an outerbody synergy you're starting to build with another person. "
            "it's the basis of any relationship, good or bad.",
        ),
    ),
    5: Entry(
        title="fluxia",
        part_of_speech="n.",
        paragraphs=(
            "a state of constant change where you're not experiencing proper time and space to "
            "reflect and internalize what's happening. your body is racing as your mind can "
            "barely keep up. it can feel exhilarating—life is closest to cinematic in this "
            "sensation, where everything feels like a cut scene to the next life-altering "
            "interaction. it can also be depressing, where you feel as though you're aimlessly "
            "dragging around and not in control of your passions, interests, or values.",
        ),
    ),
    6: Entry(
        title="ancieno",
        part_of_speech="n.",
        paragraphs=(
            "a state of operating as if you live in the past. the year is 2025; however, to you "
            "it is 1880. you interact with the world as if there's no notion of technology, "
            "walking and horses are your main modes of transportation, and you send letters for "
            "any long-distance communication. your knowledge base is only filled with inventions, "
            "ideologies, and events until the year 1880. in some ways, this could make for some "
            "interesting constrained brainstorming?",
        ),
    ),
    7: Entry(
        title="digiphysis",
        part_of_speech="n.",
        paragraphs=(
            "the state of existing simultaneously in digital and physical realms, where your "
            "consciousness splits between the screen and the flesh. what if we could truly "
            "inhabit both spaces at once—feeling the texture of a virtual object while your "
            "physical hand remains empty? digiphysis challenges the boundary between what's "
            "\"real\" and what's \"simulated,\" suggesting that presence isn't about location but "
            "about the depth of engagement. in this state, you're not just using "
            "technology—you're becoming a hybrid entity that transcends traditional spatial "
            "limitations.",
        ),
        credit=AI_CREDIT,
    ),
    8: Entry(
        title="synthosia",
        part_of_speech="n.",
        paragraphs=(
            "the experience of shared consciousness through technology, where multiple minds "
            "temporarily merge through digital interfaces. imagine feeling another person's "
            "emotional state not through empathy but through direct neural connection "
            "facilitated by AI. synthosia could revolutionize how we understand "
            "relationships—what if intimacy wasn't about physical proximity but about the "
            "depth of shared experience? this raises questions about identity: if you can feel "
            "what another feels, where do you end and they begin?",
        ),
        credit=AI_CREDIT,
    ),
    9: Entry(
        title="temporflux",
        part_of_speech="n.",
        paragraphs=(
            "the distortion of time perception caused by constant digital stimulation, where "
            "hours feel like minutes and minutes feel like hours depending on your level of "
            "engagement. in a world of infinite scrolls and instant notifications, temporflux "
            "describes how we've lost our natural rhythm. what if we could intentionally "
            "manipulate this perception—slowing down moments of beauty, speeding through "
            "mundane tasks? temporflux suggests that time isn't linear but elastic, shaped by "
            "our attention and intention.",
        ),
        credit=AI_CREDIT,
    ),
    10: Entry(
        title="identifluid",
        part_of_speech="n.",
        paragraphs=(
            "the state of having a fluid, multi-layered identity that shifts between contexts "
            "without losing core essence. in digital spaces, you can be anyone—but what if "
            "this wasn't deception but expansion? identifluid suggests that we're not single "
            "selves but collections of potential selves, each valid in different moments. "
            "technology allows us to explore these versions, to try on different ways of being. "
            "the question becomes: which version is most \"you,\" or are they all equally "
            "authentic?",
        ),
        credit=AI_CREDIT,
    ),
    11: Entry(
        title="connectium",
        part_of_speech="n.",
        paragraphs=(
            "the fundamental particle of human connection in the digital age—the smallest "
            "meaningful unit of interaction that creates bonds between people. a single message, "
            "a shared moment, a synchronized experience across screens. connectium suggests that "
            "relationships aren't built through grand gestures but through countless "
            "micro-interactions. in a world where we're more connected than ever yet feel more "
            "isolated, understanding connectium could help us design technologies that foster "
            "genuine human bonds rather than superficial engagement.",
        ),
        credit=AI_CREDIT,
    ),
    12: Entry(
        title="reallayer",
        part_of_speech="n.",
        paragraphs=(
            "the perception that reality exists in multiple overlapping layers, each accessible "
            "through different modes of consciousness or technology. augmented reality gives us "
            "a glimpse—what if we could peel back layers to see the emotional states of "
            "others, the historical context of spaces, or the potential futures branching from "
            "each moment? reallayer challenges us to see beyond the surface, to understand that "
            "what we perceive is just one frequency in a spectrum of existence. technology "
            "becomes a tool not for escape but for deeper engagement with the multi-dimensional "
            "nature of being.",
        ),
        credit=AI_CREDIT,
    ),
}


def fallback_entry(node_id: int, x: float, y: float) -> Entry:
    """Generic card for a node without curated content."""
    return Entry(
        title=f"Node {node_id}",
        paragraphs=(f"Position: ({x:.2f}, {y:.2f})",),
        is_curated=False,
    )


def describe_node(node) -> Entry:
    """
    Card for a clicked node.

    Args:
        node: Anything with id, x and y (Node or NodeView)

    Returns:
        The curated Entry for the identity, or a generic one with its position
    """
    entry = ENTRIES.get(node.id)
    if entry is not None:
        return entry
    return fallback_entry(node.id, node.x, node.y)

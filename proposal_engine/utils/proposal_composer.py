"""
Proposal Composer

Builds the short selling points shown next to a proposal and the templated
fallback proposal used when the text-generation service is unavailable.

Phrase variants are immutable tables owned by this module. Which variant is
used comes from an injected random source so tests can pin the choice.
"""
import random
import logging
from typing import Optional, Sequence, Tuple

from proposal_engine.domain.constants import (
    ProposalLength,
    MAX_KEY_POINTS,
    MAX_HIGHLIGHTED_SKILLS,
)
from proposal_engine.utils.skill_matching import SkillMatchResult
from proposal_engine.utils.text_analysis import contains_any, first_sentence, format_amount

logger = logging.getLogger(__name__)


# =============================================================================
# KEY POINT VARIANTS
# =============================================================================

SKILL_POINT_VARIANTS: Tuple[str, ...] = (
    "Expert in {skills}",
    "Specialized in {skills}",
    "Proficient in {skills}",
    "Strong background in {skills}",
)

EXPERIENCE_POINT_VARIANTS: Tuple[str, ...] = (
    "Proven track record with similar projects",
    "Extensive experience in related projects",
    "Successfully completed similar work",
    "Strong portfolio of relevant projects",
)

PORTFOLIO_POINT_VARIANTS: Tuple[str, ...] = (
    "Relevant portfolio demonstrating expertise",
    "Portfolio showcasing similar projects",
    "Examples of successful implementations",
    "Demonstrated results in past work",
)

RATE_POINT_VARIANTS: Tuple[str, ...] = (
    "Competitive rate at ${rate}/hour",
    "Fair pricing at ${rate}/hour",
    "Reasonable rate of ${rate}/hour",
    "Cost-effective at ${rate}/hour",
)

AVAILABILITY_POINT_VARIANTS: Tuple[str, ...] = (
    "Available to start immediately",
    "Ready to begin right away",
    "Can start working today",
    "Immediate availability for project",
)


# =============================================================================
# FALLBACK PROPOSAL VARIANTS
# =============================================================================

OPENING_VARIANTS: Tuple[str, ...] = (
    "I've carefully reviewed your {title} requirements and understand exactly what you need.",
    "Your {title} project caught my attention because it aligns perfectly with my expertise.",
    "I noticed your {title} posting and I'm confident I can deliver exactly what you're looking for.",
    "After reading your {title} requirements, I'm excited to help you achieve your goals.",
)

# (trigger keywords, focus lines); first family with a keyword present wins
PROBLEM_FOCUS_FAMILIES: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (
        ("bug", "fix", "error"),
        (
            "I specialize in debugging and fixing complex issues quickly and efficiently.",
            "I excel at identifying and resolving technical problems with minimal downtime.",
            "My expertise lies in troubleshooting and implementing lasting solutions.",
        ),
    ),
    (
        ("build", "develop", "create"),
        (
            "I excel at building robust, scalable solutions from the ground up.",
            "I specialize in creating high-quality applications that meet business objectives.",
            "I focus on developing efficient, maintainable solutions that scale with your needs.",
        ),
    ),
    (
        ("improve", "optimize", "enhance"),
        (
            "I focus on optimizing and enhancing existing systems for better performance.",
            "I specialize in improving application performance and user experience.",
            "I excel at refactoring and optimizing code for maximum efficiency.",
        ),
    ),
)

GENERIC_PROBLEM_FOCUS: Tuple[str, ...] = (
    "I deliver high-quality solutions tailored to your specific requirements.",
    "I provide custom solutions that address your unique business challenges.",
    "I focus on creating solutions that drive real business value.",
)

SKILLED_APPROACH_VARIANTS: Tuple[str, ...] = (
    "My approach using {skills} will ensure:",
    "Leveraging {skills}, I'll deliver:",
    "Using my expertise in {skills}, you can expect:",
)

GENERIC_APPROACH_VARIANTS: Tuple[str, ...] = (
    "My development approach will ensure:",
    "My proven methodology delivers:",
    "You can expect:",
)

CLOSING_VARIANTS: Tuple[str, ...] = (
    "Would you like to discuss the specific technical challenges and my proposed solution?",
    "I'd love to discuss how I can help you achieve your project goals.",
    "Let's schedule a call to discuss your requirements in detail.",
    "I'm ready to start immediately - when can we begin?",
)


class ProposalComposer:
    """
    Composes key points and fallback proposals.

    Stateless apart from the random source, which only needs a
    ``randrange(n)`` method (``random.Random`` in production).
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _pick(self, options: Sequence[str], randomize: bool = True) -> str:
        if not randomize:
            return options[0]
        return options[self.rng.randrange(len(options))]

    @staticmethod
    def _highlighted_skills(skill_match: SkillMatchResult) -> list:
        return skill_match.matched_profile_skills[:MAX_HIGHLIGHTED_SKILLS]

    # ===================== KEY POINTS =====================

    def generate_key_points(
        self,
        profile,
        job,
        skill_match: SkillMatchResult,
        add_variation: bool = False,
    ) -> list:
        """
        Up to four selling points for the proposal sidebar.

        Args:
            profile: FreelancerProfile
            job: JobPosting
            skill_match: Skill match for this profile/job pair
            add_variation: Pick random phrasing instead of the first variant

        Returns:
            Ordered list of short statements
        """
        points = []

        matching_skills = self._highlighted_skills(skill_match)
        if matching_skills:
            template = self._pick(SKILL_POINT_VARIANTS, add_variation)
            points.append(template.format(skills=", ".join(matching_skills)))

        if profile.experience:
            points.append(self._pick(EXPERIENCE_POINT_VARIANTS, add_variation))

        if profile.portfolio:
            points.append(self._pick(PORTFOLIO_POINT_VARIANTS, add_variation))

        if profile.hourly_rate > 0:
            template = self._pick(RATE_POINT_VARIANTS, add_variation)
            points.append(template.format(rate=format_amount(profile.hourly_rate)))

        points.append(self._pick(AVAILABILITY_POINT_VARIANTS, add_variation))

        return points[:MAX_KEY_POINTS]

    # ===================== FALLBACK PROPOSAL =====================

    def _problem_focus(self, description: str) -> str:
        description_lower = (description or "").lower()
        for keywords, lines in PROBLEM_FOCUS_FAMILIES:
            if contains_any(description_lower, keywords):
                return self._pick(lines)
        return self._pick(GENERIC_PROBLEM_FOCUS)

    def generate_fallback_proposal(
        self,
        profile,
        job,
        preferences,
        skill_match: SkillMatchResult,
    ) -> str:
        """
        Templated proposal used when text generation is unavailable.

        Content density follows preferences.length (short, medium, long);
        unknown lengths get the medium template.
        """
        matching_skills = self._highlighted_skills(skill_match)
        skills_text = ", ".join(matching_skills)
        expertise_text = (
            skills_text
            or ", ".join(profile.skills[:MAX_HIGHLIGHTED_SKILLS])
            or "my core skills"
        )

        opening = self._pick(OPENING_VARIANTS).format(title=job.title)
        problem_focus = self._problem_focus(job.description)
        if matching_skills:
            approach = self._pick(SKILLED_APPROACH_VARIANTS).format(skills=skills_text)
        else:
            approach = self._pick(GENERIC_APPROACH_VARIANTS)
        closing = self._pick(CLOSING_VARIANTS)

        timeline_text = job.duration or "agreed"
        rate = format_amount(profile.hourly_rate)
        experience_highlight = first_sentence(profile.experience)
        length = getattr(preferences, "length", ProposalLength.MEDIUM.value)

        if length == ProposalLength.SHORT.value:
            return f"""{opening}

{problem_focus}

{approach}
• Clean, maintainable code
• Thorough testing
• Clear documentation
• Delivery within your {timeline_text} timeline

I'm available to start immediately at a competitive rate.

{closing}

Best regards,
{profile.name}"""

        if length == ProposalLength.LONG.value:
            experience_line = f"My experience includes {experience_highlight}. " if experience_highlight else ""
            return f"""{opening}

{problem_focus}

With my extensive background as a {profile.title or 'freelancer'}, I bring deep expertise in {expertise_text}. Over the years, I have successfully completed numerous projects similar to yours, consistently delivering high-quality results that exceed client expectations.

{approach}
• Clean, maintainable code that follows industry best practices
• Comprehensive testing strategy to prevent future issues
• Clear documentation for easy maintenance and scalability
• Regular progress updates and transparent communication
• Delivery within your specified {timeline_text} timeline
• Post-launch support to ensure smooth operation

What sets me apart is my commitment to understanding your specific business needs and translating them into effective technical solutions. {experience_line}I take pride in my attention to detail and my ability to work collaboratively with clients throughout the development process.

My approach involves thorough planning, iterative development, and continuous feedback to ensure the final product aligns perfectly with your vision. I understand the importance of meeting deadlines and staying within budget while never compromising on quality.

I'm available to start immediately at ${rate}/hour and can deliver the quality results you're looking for. I would welcome the opportunity to discuss your project requirements in detail and provide you with a customized solution that meets your specific needs.

{closing}

Looking forward to the opportunity to contribute to your project's success.

Best regards,
{profile.name}
{profile.title}""".rstrip()

        experience_line = f"{experience_highlight}. " if experience_highlight else ""
        return f"""{opening}

{problem_focus}

{approach}
• Clean, maintainable code that follows best practices
• Comprehensive testing to prevent future issues
• Clear documentation and progress updates
• Delivery within your {timeline_text} timeline

What sets me apart:
{experience_line}My expertise in {expertise_text} enables me to deliver solutions that are both technically sound and business-focused.

I understand the importance of clear communication throughout the development process and will keep you updated on progress every step of the way. My goal is to not just meet your requirements, but to exceed your expectations and deliver a solution that drives real value for your business.

I'm available to start immediately at ${rate}/hour and can deliver the quality results you're looking for.

{closing}

Best regards,
{profile.name}
{profile.title}""".rstrip()

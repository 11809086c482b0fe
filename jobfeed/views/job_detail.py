from typing import List

from jobfeed.models.job import JobPosting

NO_DESCRIPTION = 'No description available'
NO_REQUIREMENTS = 'No specific requirements'
NO_APPLY_LINK = 'Not provided'


class JobDetailScreen:
    """
    Detail view of one posting. Receives the posting by value; never fetches.
    """

    def __init__(self, job: JobPosting):
        self.job = job

    def lines(self) -> List[str]:
        job = self.job
        lines = [f"{job.title}"]
        if job.logo_url:
            lines.append(f"Logo: {job.logo_url}")

        return lines + [
            f"Company: {job.company}",
            f"Location: {job.location}",
            f"Description: {job.description or NO_DESCRIPTION}",
            f"Requirements: {job.requirements or NO_REQUIREMENTS}",
        ]

    def apply_message(self) -> str:
        return f"Application link: {self.job.apply_link or NO_APPLY_LINK}"

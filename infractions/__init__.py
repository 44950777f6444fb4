"""PZ Antwerpen traffic-infraction dashboard data generator."""

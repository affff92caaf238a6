"""LaunchGuard - anti-snipe launch protection and token risk scoring for Solana."""
